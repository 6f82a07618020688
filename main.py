import os
import sys
import time
import logging
import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.markdown import Markdown
from rich.prompt import Prompt
from rich.text import Text
from rich.theme import Theme

# Import Engine Components
from text_adventure.campaign import CampaignError, campaign_path, list_campaigns, load_campaign
from text_adventure.commands import Look, Quit
from text_adventure.director import update
from text_adventure.listener import parse, read_line

# --- CONFIGURATION ---
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CONFIG_PATH = os.path.join(BASE_DIR, "config.yaml")
DEFAULT_CONFIG = {
    "campaign": "kaer_morhen",
    "worlds_dir": "data/worlds",
    "prompt": "> ",
    "debug_mode": False,
    "look_on_start": True,
}

# 1. SETUP THEME
custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})

console = Console(theme=custom_theme)
log = logging.getLogger("text_adventure")


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def config_path():
    return os.getenv("ADVENTURE_CONFIG", DEFAULT_CONFIG_PATH)


def load_config(path=None):
    """
    Loads config.yaml or creates default if missing.
    Missing keys fall back to DEFAULT_CONFIG; ADVENTURE_DEBUG=1 forces debug mode.
    """
    path = path or config_path()
    if not os.path.exists(path):
        default_yaml = """
# TEXT ADVENTURE CONFIGURATION
# ----------------------------
# campaign: world file (without .yaml) inside worlds_dir to start with.

campaign: kaer_morhen
worlds_dir: data/worlds
prompt: "> "
debug_mode: false
look_on_start: true
"""
        with open(path, "w") as f:
            f.write(default_yaml.strip() + "\n")

    with open(path, "r") as f:
        loaded = yaml.safe_load(f) or {}

    config = dict(DEFAULT_CONFIG)
    config.update(loaded)
    if os.getenv("ADVENTURE_DEBUG") == "1":
        config["debug_mode"] = True
    return config


def save_config(config, path=None):
    with open(path or config_path(), "w") as f:
        yaml.dump(config, f, default_flow_style=False)


def worlds_dir(config):
    directory = config.get("worlds_dir", DEFAULT_CONFIG["worlds_dir"])
    if not os.path.isabs(directory):
        directory = os.path.join(BASE_DIR, directory)
    return directory


def setup_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ============================================
# GAME LOOP
# ============================================
def run_session(state, read, write, on_turn=None):
    """
    Drives the Director until the player quits or input runs out.

    read() returns one line (raising EOFError at end of input), write(message)
    displays a Message. on_turn(command, state) is called after every turn.
    Returns the final GameState.
    """
    while True:
        try:
            line = read()
        except EOFError:
            log.debug("input closed")
            break

        if not line.strip():
            continue

        command = parse(line)
        state, message = update(state, command)
        write(message)

        if on_turn:
            on_turn(command, state)

        if isinstance(command, Quit):
            break

    return state


def show_state(command, state):
    inventory = ", ".join(item.name for item in state.inventory) or "(empty)"
    console.print(Panel(
        f"[dim]Command:[/] {command!r}\n[dim]Room:[/] {state.current_room}\n[dim]Inventory:[/] {inventory}",
        title="[DEBUG: Game State]",
        border_style="dim",
    ))


def write_message(message):
    console.print(Panel(Text(str(message)), border_style="info"))


def start_game(config, campaign_id=None):
    clear_screen()
    console.print(Panel("[info]LOADING CAMPAIGN...[/info]", border_style="info"))

    campaign_id = campaign_id or config.get("campaign", DEFAULT_CONFIG["campaign"])
    path = campaign_path(worlds_dir(config), campaign_id)

    # 1. LOAD CAMPAIGN DATA
    try:
        campaign = load_campaign(path)
    except FileNotFoundError as e:
        console.print(Panel(f"[warning]ERROR: Campaign data not found.[/] Missing file: {e}", border_style="warning"))
        time.sleep(3)
        return None
    except yaml.YAMLError as e:
        console.print(Panel(f"[warning]YAML STRUCTURE ERROR:[/]\nCheck your world file for indentation or syntax errors.\nDetails: {e}", border_style="warning"))
        time.sleep(5)
        return None
    except CampaignError as e:
        console.print(Panel(f"[warning]WORLD FILE ERROR:[/]\n{e}", border_style="warning"))
        time.sleep(5)
        return None

    console.print(Panel(
        f"[bold blue]{campaign.title}[/bold blue]",
        title="CAMPAIGN STARTED",
        border_style="info"
    ))
    if campaign.intro:
        console.print(Text(campaign.intro))
    console.print("[dim]Type 'help' for commands, 'quit' to return to menu.[/dim]\n")

    # 2. OPENING LOOK
    state = campaign.state
    if config.get("look_on_start", True):
        state, message = update(state, Look())
        write_message(message)

    # 3. THE LOOP
    prompt = config.get("prompt", DEFAULT_CONFIG["prompt"])
    on_turn = show_state if config.get("debug_mode", False) else None
    return run_session(
        state,
        read=lambda: read_line(prompt, reader=console.input),
        write=write_message,
        on_turn=on_turn,
    )


# ============================================
# MENU
# ============================================
def show_welcome_screen(config):
    clear_screen()

    welcome_md = Markdown("""
    # TEXT ADVENTURE

    A small world of rooms, exits and things to pick up.
    """)

    console.print(Panel(
        welcome_md,
        border_style="info",
        padding=(1, 2),
        width=60
    ))

    console.print("\n[dim]Select an option:[/dim]\n")

    debug_state = "On" if config.get('debug_mode', False) else "Off"
    menu_options = [
        ("1", f"Start Campaign: {config.get('campaign')}"),
        ("2", "Choose Campaign"),
        ("D", f"Toggle Debug Mode (current: {debug_state})"),
        ("3", "Quit")
    ]

    for key, label in menu_options:
        console.print(f" [[info]{key}[/info]] {label}")

    print()
    return Prompt.ask(" >", choices=["1", "2", "3", "D", "d"], default="1")


def toggle_debug(config):
    """Toggles the debug_mode flag in config.yaml."""
    config['debug_mode'] = not config.get('debug_mode', False)
    save_config(config)
    setup_logging(config['debug_mode'])
    clear_screen()
    console.print(Panel(
        f"[info]DEBUG MODE:[/][bold]{' ON' if config['debug_mode'] else ' OFF'}[/bold]",
        border_style="info"
    ))
    time.sleep(1)


def choose_campaign(config):
    campaigns = list_campaigns(worlds_dir(config))
    if not campaigns:
        console.print("\n[warning]No world files found.[/warning]")
        time.sleep(1)
        return

    for i, campaign_id in enumerate(campaigns):
        console.print(f" [[info]{i + 1}[/info]] {campaign_id}")
    choice = Prompt.ask(" >", choices=[str(i + 1) for i in range(len(campaigns))])
    config['campaign'] = campaigns[int(choice) - 1]
    save_config(config)


# ============================================
# MAIN
# ============================================
def main():
    load_dotenv()
    config = load_config()
    setup_logging(config.get('debug_mode', False))

    while True:
        choice = show_welcome_screen(config)

        if choice == "1":
            try:
                start_game(config)
            except KeyboardInterrupt:
                console.print("\n[dim]Back to menu.[/dim]")
        elif choice.upper() == "D":
            toggle_debug(config)
        elif choice == "2":
            choose_campaign(config)
        elif choice == "3":
            console.print("\nGoodbye.")
            sys.exit()


if __name__ == "__main__":
    main()
