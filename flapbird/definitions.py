"""Game-wide constants: screen geometry, timings, physics and asset paths."""

from enum import IntEnum

SCREEN_WIDTH = 650
SCREEN_HEIGHT = 1000

SPLASH_STATE_SHOW_TIME = 3.0

SPLASH_SCENE_BACKGROUND_FILEPATH = "../assets/res/bird-splash.jpg"
MAIN_MENU_BACKGROUND_FILEPATH = "../assets/res/sky.png"
GAME_TITLE_FILEPATH = "../assets/res/title.png"
PLAY_BUTTON_FILEPATH = "../assets/res/PlayButton.png"
GAME_BACKGROUND_FILEPATH = "../assets/res/sky.png"
GAME_OVER_BACKGROUND_FILEPATH = "../assets/res/sky.png"
PIPE_UP_FILEPATH = "../assets/res/PipeUp.png"
PIPE_DOWN_FILEPATH = "../assets/res/PipeDown.png"
SCORING_PIPE_FILEPATH = "../assets/res/InvisibleScoringPipe.png"
LAND_FILEPATH = "../assets/res/land.png"
BIRD_FILEPATH = "../assets/res/bird-01.png"
FLAPPY_FONT_FILEPATH = "../assets/fonts/FlappyFont.ttf"
GAME_OVER_TITLE_FILEPATH = "../assets/res/Game-Over-Title.png"
GAME_OVER_BODY_FILEPATH = "../assets/res/Game-Over-Body.png"

HIGH_SCORE_FILEPATH = "../Highscore.txt"

GRAVITY = 350.0
FLY_SPEED = 350.0
FLY_DURATION = 0.25

PIPE_MOVE_SPEED = 200.0
PIPE_SPAWN_FREQUENCY = 1.5

TIME_BEFORE_GAME_OVER = 1.0

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)


class GameStates(IntEnum):
    """Phases of a round of play."""

    READY = 0
    PLAYING = 1
    GAME_OVER = 2


class BirdState(IntEnum):
    """Motion state of the bird."""

    STILL = 1
    FALL = 2
    FLY = 3