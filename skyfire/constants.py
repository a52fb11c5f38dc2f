"""
Field dimensions, entity sizes and speeds, spawn and difficulty tuning knobs,
colors, font sizes, asset paths, and logging/persistence configuration.
"""

import os

WIDTH, HEIGHT = 1000, 600          # logical play field
FPS = 60                           # target frame rate
BG_COLOR = (10, 12, 28)            # night sky fallback
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)
PROJECTILE_COLOR = (255, 255, 0)
PLAYER_COLOR = (90, 180, 255)      # used when player.png is missing
ENEMY_COLOR = (220, 70, 70)        # used when enemy.png is missing
HUD_PADDING = 12
FONT_NAME = None                   # pygame default font

# Font Size Constants
FONT_SIZE_SMALL = 20
FONT_SIZE_MEDIUM = 24
FONT_SIZE_LARGE = 40

# Player
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 50
PLAYER_SPEED = 5
PLAYER_BOTTOM_OFFSET = 80          # player.y = HEIGHT - offset

# Projectiles
PROJECTILE_WIDTH = 5
PROJECTILE_HEIGHT = 10
PROJECTILE_SPEED = 6
RAPID_FIRE_INTERVAL_MS = 100

# Enemy waves
ENEMY_COUNT = 7
ENEMY_WIDTH = 50
ENEMY_HEIGHT = 50
ENEMY_SPAWN_Y = 50
ENEMY_BASE_SPEED = 0.5
SPAWN_INTERVAL_MS = 3000

# Scoring & difficulty
ENEMY_KILL_BONUS = 5
SPEED_THRESHOLD_START = 100
SPEED_THRESHOLD_STEP = 100
FIRST_SPEED_INCREASE = 1.32        # first threshold reached
SUBSEQUENT_SPEED_INCREASE = 1.15   # every threshold after that

# Log file and persistence settings
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOG_FILE = os.environ.get("SKYFIRE_LOG_FILE", os.path.join(BASE_DIR, "log.md"))
BEST_SCORE_FILE = os.environ.get("SKYFIRE_BEST_SCORE_FILE", os.path.join(BASE_DIR, "best_score.json"))

ASSETS_DIR = os.path.join(BASE_DIR, "assets")
PLAYER_SPRITE_PATH = os.path.join(ASSETS_DIR, "player.png")      # optional
ENEMY_SPRITE_PATH = os.path.join(ASSETS_DIR, "enemy.png")        # optional
BACKGROUND_PATH = os.path.join(ASSETS_DIR, "background.png")     # optional
