"""
The Lore Table: static descriptions consulted by `examine`, and the bespoke
effects of the few items `use` knows about.

Keys are canonical (lower-cased) item names.
"""

DEFAULT_LORE = "You see nothing special about it."

LORE = {
    "witcher medallion": (
        "A silver wolf's head on a heavy chain, teeth bared.\n"
        "Every witcher of the School of the Wolf wears one.\n"
        "It trembles when magic stirs nearby."
    ),
    "medallion": (
        "A tarnished medallion, warm to the touch.\n"
        "Someone has scratched a wolf into its face."
    ),
    "silver sword": (
        "A witcher's silver blade, etched with runes along the fuller.\n"
        "Useless against men, deadly against monsters."
    ),
    "steel sword": (
        "A plain steel longsword from Mahakam forges.\n"
        "For bandits, drowners and anything else with a pulse."
    ),
    "sword": (
        "A notched training sword, balanced for the Gauntlet.\n"
        "Generations of apprentices have bled on it."
    ),
    "torch": (
        "A pitch-soaked torch wrapped in oiled rags.\n"
        "It would light even the deepest cellar of the keep."
    ),
    "swallow potion": (
        "A murky green potion in a stoppered vial.\n"
        "Witchers drink it to close wounds; it would poison anyone else."
    ),
    "bestiary": (
        "A leather-bound bestiary, its pages stiff with old blood.\n"
        "Entries on griffins, wraiths and the kikimore queen fill the margins."
    ),
    "rusty key": (
        "An iron key, rusted almost through.\n"
        "The bow is stamped with the crest of Kaer Morhen."
    ),
}

# Effects of `use`, keyed by canonical item name.
USE_EFFECTS = {
    "torch": "You raise the torch. Shadows crawl back into the corners of the room.",
    "witcher medallion": "The medallion hums against your chest. There is magic close by.",
    "swallow potion": "You uncork the vial and sniff. Better to save it for after the fight.",
    "silver sword": "You trace a few practice arcs with the silver sword. Nothing here needs killing.",
}


def lookup_lore(name: str) -> str:
    """Lore text for a canonical item name, or the default text."""
    return LORE.get(name, DEFAULT_LORE)


def use_effect(name: str):
    """Bespoke effect text for a canonical item name, or None if the item does nothing."""
    return USE_EFFECTS.get(name)
