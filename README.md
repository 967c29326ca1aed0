# flapbird

A small side-scrolling arcade game. Click to keep the bird in the air, slip
through the gaps between the pipes and don't touch the ground. Each pipe
pair you pass scores a point. The best score is kept between sessions.

## Installing

```
pip install .
```

This also installs pygame, which the game uses for drawing and input.

## Playing

```
flapbird
```

`python -m flapbird.game` starts the game in the same way. The command takes
no options apart from `--help`.

The game opens a 650 × 1000 window and moves through these screens:

1. **Splash screen.** Shown for three seconds.
2. **Main menu.** Click the play button to start a round.
3. **Game.** The bird hovers until your first left click. After that, each
   left click on the window makes it fly upwards for a quarter of a second,
   and then it falls again. A new pipe pair appears every one and a half
   seconds, shifted up by a random amount between zero and the height of the
   ground image. If the bird touches a pipe or the ground, the round ends.
   The current score is drawn near the top of the window and is also printed
   to standard output.
4. **Game over.** One second after a crash, this screen shows the final score
   and the high score. Click the play button to start another round.

Close the window to quit at any time.

### Files it reads and writes

All paths are relative to the directory the game is started from:

- Images are loaded from `../assets/res/`. If an image cannot be opened or
  decoded, the game stops with `flapbird.assets.AssetError` and names the
  file.
- The score font is loaded from `../assets/fonts/FlappyFont.ttf`. A font
  that cannot be loaded is skipped at load time. The game then fails with a
  `KeyError` when it first draws the score.
- The high score is read from and written to `../Highscore.txt`. If the
  file is missing or unreadable, the high score counts as 0. A failed write
  is ignored.

## Using the pieces

The modules can also be used on their own:

- `flapbird.game.Game`: opens the window. `Game.step(frame_time)` advances
  one frame with a fixed update rate of 60 updates per second, caps each
  frame at 0.25 s, and returns the number of updates it ran. `Game.run()`
  keeps stepping until the window is closed.
- `flapbird.context.GameData`: the state shared by every screen. This is the
  window, the `StateMachine`, the `AssetManager`, a clock function, a
  `random.Random`, the high-score path and a `running` flag. You can pass in
  your own clock and random source to get repeatable runs.
- `flapbird.state_machine`: the `State` base class and a `StateMachine`.
  The machine queues `add_state` and `remove_state` calls and applies them in
  `process_state_changes`.
- `flapbird.collision`: `Rect`, `Sprite` and `check_collision`, which does an
  axis-aligned bounding-box test.
- `flapbird.play`: the playing and game-over screens, plus
  `read_high_score(path)` and `record_high_score(path, score)`.

## What it does not do

- There is no sound.
- There is no keyboard control. Input is the left mouse button only.
- Window size, timings and asset locations are fixed constants in
  `flapbird.definitions`. They are not options.

## Running the tests

```
pip install .[test]
pytest
```