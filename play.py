from dotenv import load_dotenv

from main import console, load_config, setup_logging, start_game, worlds_dir
from text_adventure.campaign import list_campaigns


def pick_campaign(choice, campaigns):
    """
    Resolves a menu answer to a campaign id: a 1-based number or a partial name.
    Returns (campaign_id, error_text); exactly one of them is None.
    """
    if choice.isdigit():
        idx = int(choice) - 1
        if 0 <= idx < len(campaigns):
            return campaigns[idx], None
        return None, "Invalid selection."

    matches = [c for c in campaigns if choice in c.lower()]
    if len(matches) == 1:
        return matches[0], None
    elif len(matches) > 1:
        return None, f"Ambiguous: {', '.join(matches)}"
    return None, "No match found."


def play_campaign(config, campaign_id):
    """Runs one session; Ctrl-C ends the session and returns to the picker."""
    try:
        return start_game(config, campaign_id=campaign_id)
    except KeyboardInterrupt:
        console.print("\n[dim]Back to menu.[/dim]")
        return None


def main():
    load_dotenv()
    config = load_config()
    setup_logging(config.get('debug_mode', False))

    while True:
        campaigns = list_campaigns(worlds_dir(config))
        if not campaigns:
            console.print("No worlds found.")
            return

        console.print("\n=== Main Menu ===")
        console.print("Available Worlds:")
        for i, campaign_id in enumerate(campaigns):
            console.print(f"{i + 1}. {campaign_id}")
        console.print("\nCommands:")
        console.print("- Type a number to play")
        console.print("- Type a name (partial match) to play")
        console.print("- Type 'quit' to exit")

        try:
            choice = console.input("\nSelect a world: ").strip().lower()
            if not choice: continue

            if choice == 'quit':
                console.print("Goodbye.")
                break

            selected, error = pick_campaign(choice, campaigns)
            if error:
                console.print(error)
                continue

            console.print(f"\nLoading {selected}...")
            play_campaign(config, selected)

        except (KeyboardInterrupt, EOFError):
            console.print("\nExiting.")
            break


if __name__ == "__main__":
    main()
