# flappy

A small Flappy Bird game. The bird falls under gravity. Press a key to flap
and steer it through the gaps between the pipes that scroll in from the right.
Every pipe you pass adds a point to your score.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
flappy
```

A 384 × 600 window opens on the main menu.

- **Space** or **Up arrow** starts a game from the menu.
- While playing, **Space** or **Up arrow** makes the bird flap.
- The game ends when the bird hits a pipe or leaves the top or bottom of the
  window. Press **Space** or **Up arrow** to go back to the menu. Press it
  again to start a new game.
- Close the window to quit.

Text is drawn with the font in `assets/arial.ttf`. The path is relative to the
directory you start the game from. If that file cannot be loaded, a warning is
logged and the game still runs, but it shows no text.

Each frame's elapsed time is capped at 0.1 seconds by
`flappy.app.clamp_frame_time`. A stalled frame therefore does not make the bird
or the pipes jump.

## What it does not do

The bird and the pipes are drawn as plain coloured rectangles. There are no
images and no sound. Scores are not saved between games or between runs.

## How it is built

The game is a tree of nodes from `flappy.engine`. Each node can hold state and
can register hooks:

- `Node.state(initial)` creates a `State` that holds a value. Read it with
  `get()` and write it with `set(value)`.
- `Node.update(fn)` runs `fn(dt)` once per frame.
- `Node.render(fn)` runs `fn(surface)` when the frame is drawn.
- `Node.event(fn)` runs `fn(event)` for each input event.
- `Node.effect(fn, *states)` runs `fn` the first time the node is updated. It
  runs again on later updates whenever one of the listed states has changed
  since the last run. Arguments that are not `State` objects are ignored.
- `Node.derived(compute, *states)` returns a `State` that is recomputed
  whenever the listed states change.
- `Node.find_state(kind)` returns the node's first state whose value is an
  instance of `kind`.

The update, render and event hook methods return the function they are given,
so they can be used as decorators.

`conditional(condition, child)` shows `child` only while the boolean state
`condition` is true. `fragment(*children)` groups nodes together. `val(prop)`
resolves a prop, which may be a plain value, a `State` or a zero-argument
callable. `update_tree`, `render_tree` and `event_tree` walk the tree and visit
each node before its children.

The game is made of these components:

- `flappy.bird.bird`
- `flappy.pipes.pipes`, which takes an optional `random.Random` to choose where
  the gaps go
- `flappy.text.text`
- `flappy.game.game`

Constants, `GameStatus` and `Rect` are in `flappy.settings`.

## Running the tests

```
pip install ".[test]"
pytest
```