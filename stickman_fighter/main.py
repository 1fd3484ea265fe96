#!/usr/bin/env python3
"""
STICKMAN FIGHTER
================
Entry point for the game.

Run: stickman-fighter  (or python -m stickman_fighter.main)
"""

import sys

from stickman_fighter.config import GAME_TITLE, PlayerSlot
from stickman_fighter.ui.menu import describe_controls


def print_help():
    print(f"{GAME_TITLE} - two stickmen, one arena")
    print("\nUsage: stickman-fighter")
    print("\nMenus:")
    print("  Up/Down, W/S  - Navigate")
    print("  Enter, Space  - Select")
    print("  1 / 2         - Single player / Versus")
    print("  Escape, P     - Pause")
    print("  M             - Mute")
    for slot, heading in ((PlayerSlot.PLAYER_ONE, "Player 1"),
                          (PlayerSlot.PLAYER_TWO, "Player 2")):
        print(f"\n{heading}:")
        for line in describe_controls(slot):
            print(f"  {line}")


def main():
    """Main entry point"""
    if len(sys.argv) > 1 and sys.argv[1] == '--help':
        print_help()
        return

    print(f"\n{'=' * 60}")
    print(f"  {GAME_TITLE}")
    print(f"{'=' * 60}\n")
    print("Loading game...")

    from stickman_fighter.core.game import Game

    game = Game()

    print("\nReady! Press Enter to start...")
    print("ESC = Pause | ENTER = Select | Arrow Keys = Navigate\n")

    try:
        game.run()
    except KeyboardInterrupt:
        print("\nGame stopped by user.")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
