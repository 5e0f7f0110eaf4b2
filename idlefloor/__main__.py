"""
__main__.py
-----------
Entry point: python -m idlefloor
"""

from idlefloor.core.runtime.game_loop import GameLoop


def main():
    GameLoop().run()


if __name__ == "__main__":
    main()
