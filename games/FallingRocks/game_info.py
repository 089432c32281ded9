"""
Falling Rocks - Game Info

Game metadata and the factory function for creating game instances.
CLI arguments live on FallingRocksMode.ARGUMENTS.
"""

NAME = "Falling Rocks"
DESCRIPTION = "Dodge the rocks and collect coins!"
VERSION = "1.0.0"
AUTHOR = "Rockfall Team"


def get_game_mode(**kwargs):
    """
    Factory function to create a FallingRocksMode instance.

    Args:
        **kwargs: Game configuration options
            - width, height: Initial window size
            - seed: Spawn RNG seed

    Returns:
        FallingRocksMode instance
    """
    from games.FallingRocks.game_mode import FallingRocksMode

    # Filter out None values and unknown options
    allowed = ('width', 'height', 'seed')
    game_kwargs = {k: v for k, v in kwargs.items() if v is not None and k in allowed}

    return FallingRocksMode(**game_kwargs)
