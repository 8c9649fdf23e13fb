# gonzocasino

A small console casino. Players join with pesos. These are changed into
gonzos at 100 pesos per gonzo. Players then bet the gonzos on four games:

1. **Mayor a 13** (`HigherThan13`): you get a number from 1 to 13. You can
   surrender and get half your bet back. You can also play on: if your number
   is higher than the house's number from 1 to 13, you win double.
2. **Dos colores** (`TwoColors`): you and the house each get a number from
   1 to 7. You pick white or black and the house draws a colour.
   - Number and colour both match: four times the bet.
   - Only the number matches: 1.5 times the bet.
   - Only the colour matches: you get your bet back.
   - Nothing matches: you lose the bet.
3. **Slots** (`Slots`): three reels each show a number from 1 to 7.
   - Three equal numbers pay seven times the bet.
   - A run that goes down by one each reel, such as `5 4 3`, pays 1.5 times
     the bet.
4. **Par Impar** (`EvenOdd`): guess whether the house's number from 1 to 10
   is even (`0`) or odd (`1`). A correct guess wins double.

The prompts and messages are in Spanish.

## Installing

```
pip install .
```

## Playing

```
gonzocasino
```

The main menu has these options:

| Option | Action |
| ------ | ------ |
| `1` | Add a player |
| `2` | Play |
| `3` | Look up a player |
| `4` | Top up a player's gonzos with pesos |
| `5` | Withdraw a player |
| `0` | Quit |

When you play, the menu asks for the player's id, the bet and the game. It
then shows the game's rules and plays one round. The casino opens with one
player, id `1` ("Pedro rodriguez"), who holds 500 gonzos. End of input
(Ctrl-D) or Ctrl-C also closes the program.

## Using it from Python

```python
import random

from gonzocasino.casino import Casino, CasinoError

casino = Casino(random.Random(7))
casino.add_player(42, "Ana", 10_000)  # 10,000 pesos -> 100 gonzos
net = casino.play(4, 42, 10, ask=input, say=print)
print(casino.get_player(42).describe())
```

The `ask` and `say` arguments handle all interaction:

- `ask` takes a prompt and returns the reply as a string.
- `say` takes one line of text to show.

To drive a game without a console, pass your own functions.

`Casino` has these methods:

- `add_player(player_id, name, pesos)` registers a player.
- `recharge(player_id, pesos)` adds gonzos to a player's balance and returns
  the gonzos added.
- `withdraw_player(player_id)` removes a player and returns it.
- `get_player(player_id)` returns the player with that id.
- `has_player(player_id)` tells whether a player with that id is registered.
- `get_game(game_id)` returns the game numbered from 1, or `None` if there is
  no such game.
- `can_continue(player_id, bet)` tells whether the player's balance covers the
  bet.
- `Casino.pesos_to_gonzos(pesos)` converts an amount of pesos into gonzos.

`Casino.play(game_id, player_id, bet, ask, say)` returns the gonzos won
(positive) or lost (negative). It updates the player's balance and game count.

`CasinoError` is raised in these cases:

- an unknown player or game;
- a bet under one gonzo;
- a balance that cannot cover the bet;
- a duplicate player id;
- a non-positive deposit;
- a negative top-up.

Each game in `gonzocasino.games` can also be used on its own:

- `rules()` returns the game's rules as text.
- `play(bet, ask, say)` plays one round and returns the gonzos paid back.
- `payout(...)` computes the result from given numbers, without drawing any.

`gonzocasino.view.View(casino, ask, say)` runs the same menu as the command
over any casino and any `ask`/`say` pair. Call `run()` to start it.

## Limits

Players and balances are kept in memory only. Nothing is saved between runs.

## Tests

```
pip install .[test]
pytest
```