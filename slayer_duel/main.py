"""
SLAYER DUEL - Tanjiro vs Demon
==============================
Entry point: `slayer-duel` atau `python -m slayer_duel.main`.
"""

import argparse
import sys
import traceback

from .config import GAME_TITLE, ASSET_DIR


CONTROLS = """\
Controls:
  Left / Right - Move
  Up           - Jump
  Space        - Attack
  Escape       - Pause
  Enter        - Resume / Play again after K.O."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slayer-duel",
        description=f"{GAME_TITLE}: one round after another against the Demon.",
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--assets", default=ASSET_DIR,
                        help="sprite sheet / background directory "
                             "(default: %(default)s, or $SLAYER_DUEL_ASSETS)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for AI and attack-type randomness")
    parser.add_argument("--mute", action="store_true",
                        help="run without sound")
    return parser


def build_game(asset_dir: str, seed=None, mute: bool = False):
    """Game dengan renderer, UI dan (kalau ada device) sound manager"""
    # pygame display modules are imported only when a window is wanted
    from .core.game import Game
    from .graphics.renderer import Renderer
    from .ui.manager import UIManager
    from .audio.sound_manager import SoundManager

    game = Game(asset_dir=asset_dir, seed=seed)

    sound_manager = None
    if mute:
        print("Audio: muted")
    elif not game.audio_available:
        print("Audio: disabled (no device)")
    else:
        sound_manager = SoundManager()
        if not sound_manager.initialized:
            print("Audio: disabled (init failed)")
            sound_manager = None

    game.initialize_systems(renderer=Renderer(game.screen, asset_dir),
                            ui_manager=UIManager(),
                            sound_manager=sound_manager)
    return game


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    print(f"\n{GAME_TITLE}\n{'=' * len(GAME_TITLE)}")
    print(CONTROLS + "\n")

    try:
        build_game(args.assets, seed=args.seed, mute=args.mute).run()
    except KeyboardInterrupt:
        print("\nGame dihentikan oleh user.")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
