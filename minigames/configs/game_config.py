"""
Game configuration presets
Both games are tuned from these dictionaries; sessions turn them into frozen configs
"""

# ==============================================================================
# CATCH AND DODGE
# ==============================================================================

DODGE_CONFIG = {
    "width": 400,
    "height": 600,
    "player_width": 30,
    "player_height": 35,
    "player_bottom_margin": 10,   # gap between player and bottom edge
    "player_speed": 240.0,        # px/s
    "item_width": 40,
    "item_height": 40,
    "item_speed": 3.0,            # px per tick (px/s when item_speed_scaled)
    "item_speed_scaled": False,
    "item_count": 10,             # alternating good / bad, first one good
    "good_reward": 10,
    "bad_damage": 1,
    "initial_life": 1,
}

# ==============================================================================
# SOCCER
# ==============================================================================

SOCCER_CONFIG = {
    "width": 800,
    "height": 500,
    "player_radius": 15.0,
    "player_speed": 200.0,        # px/s
    "opponent_radius": 15.0,
    "opponent_speed": 150.0,      # px/s, overridden by difficulty
    "ball_radius": 10.0,
    "player_kick_speed": 300.0,   # ball speed right after a touch
    "opponent_kick_speed": 300.0,
    "friction": 0.98,             # per-tick velocity multiplier
    "stop_threshold": 0.1,        # |v| below this snaps to 0
    "restitution": 0.8,           # fraction of speed kept after a wall bounce
    "goal_width_ratio": 0.3,      # goal mouth as a fraction of field height
    "goal_depth": 10.0,
    "winning_score": 3,
}

DIFFICULTY_CONFIGS = {
    "easy": {"opponent_speed": 100.0},
    "medium": {"opponent_speed": 150.0},
    "hard": {"opponent_speed": 200.0},
}

DEFAULT_DIFFICULTY = "medium"

# ==============================================================================
# ASSETS
# Relative to the asset directory passed on the command line
# ==============================================================================

ASSET_PATHS = {
    "dodge": {
        "player": "images/player.png",
        "collectible_good": "images/star.png",
        "collectible_bad": "images/bomb.png",
    },
    "soccer": {
        "player": "player.png",
        "opponent": "cpu.png",
        "ball": "ball.png",
        "kick": "kick.wav",
        "goal": "goal.wav",
    },
}


if __name__ == "__main__":
    for name, preset in (("dodge", DODGE_CONFIG), ("soccer", SOCCER_CONFIG)):
        print(f"{name}:")
        for key, value in preset.items():
            print(f"  {key:22} {value}")
