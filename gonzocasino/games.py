"""The games offered by the casino.

Every game takes a bet in gonzos and returns the gonzos handed back to the
player: zero when the bet is lost, the bet itself on a draw, and a multiple
of it on a win.  Interaction goes through two callables: ``ask`` shows a
prompt and returns the reply, ``say`` shows a line of text.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

Ask = Callable[[str], str]
Say = Callable[[str], None]

WHITE = 0
BLACK = 1


def _ask_int(ask: Ask, prompt: str) -> int:
    """Prompt until the reply is a whole number."""
    while True:
        reply = ask(prompt)
        try:
            return int(reply.strip())
        except ValueError:
            continue


class Game(ABC):
    """A game of chance played against the casino."""

    name = "Juego"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    @abstractmethod
    def rules(self) -> str:
        """Return the rules of the game as text."""

    @abstractmethod
    def play(self, bet: float, ask: Ask, say: Say) -> float:
        """Play one round and return the gonzos paid back to the player."""


class HigherThan13(Game):
    """Beat the casino's number between 1 and 13, or surrender half the bet."""

    name = "Mayor a 13"
    LOWEST = 1
    HIGHEST = 13
    SURRENDER_RETURN = 0.5
    WIN_MULTIPLIER = 2

    def rules(self) -> str:
        return (
            "REGLAS MAYOR DE 13\n"
            " 1) Se genera numero entre 1 y 13\n"
            " 2) Puedes rendirte (pierdes la mitad) o continuar...\n"
            " 3) Si tienes mayor que la casa, ganas el DOBLE\n"
            " 4) Si es menor pierdes"
        )

    def play(self, bet: float, ask: Ask, say: Say) -> float:
        player_number = self.rng.randint(self.LOWEST, self.HIGHEST)
        say(f"Tu numero aleatorio es: {player_number}")
        say("Que desea hacer?")
        say("1. Rendirse.")
        say("2. Jugar.")
        if _ask_int(ask, "Opcion: ") == 1:
            return self.SURRENDER_RETURN * bet
        casino_number = self.rng.randint(self.LOWEST, self.HIGHEST)
        say(f"Numero casino: {casino_number}")
        return self.payout(player_number, casino_number, bet)

    def payout(self, player_number: int, casino_number: int, bet: float) -> float:
        """Double the bet if the player's number is higher, else nothing."""
        if player_number > casino_number:
            return self.WIN_MULTIPLIER * bet
        return 0.0


class TwoColors(Game):
    """Match the casino's number (1 to 7) and colour."""

    name = "Dos colores"
    LOWEST = 1
    HIGHEST = 7
    FULL_MATCH = 4
    NUMBER_MATCH = 1.5

    def rules(self) -> str:
        return (
            "REGLAS DOS COLORES\n"
            "1. El jugador elige un color entre blanco y negro\n"
            "2. El sistema genera un número aleatorio y un color\n"
            "3. Si coinciden numero y color GANA 4 veces lo apostado.\n"
            "4. Si coincide el numero GANA 1.5 veces lo apostado.\n"
            "5. Si coincide el color no gana ni pierde.\n"
            "6. Si no coincide nada pierde todo lo apostado."
        )

    def play(self, bet: float, ask: Ask, say: Say) -> float:
        player_number = self.rng.randint(self.LOWEST, self.HIGHEST)
        casino_number = self.rng.randint(self.LOWEST, self.HIGHEST)
        casino_color = self.rng.randint(WHITE, BLACK)
        say(f"Tu numero aleatorio es: {player_number}")
        say("Elije un color: ")
        say("1. Blanco")
        say("2. Negro")
        player_color = _ask_int(ask, "") - 1
        say(f"Numero casino: {casino_number}")
        say("Color casino: " + ("Blanco." if casino_color == WHITE else "Negro."))
        return self.payout(player_number, casino_number, player_color, casino_color, bet)

    def payout(
        self,
        player_number: int,
        casino_number: int,
        player_color: int,
        casino_color: int,
        bet: float,
    ) -> float:
        """Pay by how much of number and colour matched."""
        same_number = player_number == casino_number
        same_color = player_color == casino_color
        if same_number and same_color:
            return self.FULL_MATCH * bet
        if same_number:
            return self.NUMBER_MATCH * bet
        if same_color:
            return bet
        return 0.0


class Slots(Game):
    """Three reels showing 1 to 7; a triple or a descending run wins."""

    name = "Slots"
    LOWEST = 1
    HIGHEST = 7
    TRIPLE = 7
    RUN = 1.5

    def rules(self) -> str:
        return (
            "REGLAS SLOTS\n"
            " 1) Se genera 3 simbolos\n"
            " 2) si caen en alguna combinacion, el jugador GANARA\n"
            " 3) De lo contrario, perdera"
        )

    def play(self, bet: float, ask: Ask, say: Say) -> float:
        say("Calculará tres numeros aleatorios del 1 al 6: ")
        reels = tuple(self.rng.randint(self.LOWEST, self.HIGHEST) for _ in range(3))
        say("Resultado slots: " + " ".join(str(reel) for reel in reels))
        return self.payout(reels, bet)

    def payout(self, slots: Sequence[int], bet: float) -> float:
        """Pay for three equal reels or a run descending by one."""
        first, second, third = slots
        if first == second == third:
            return self.TRIPLE * bet
        if first == second + 1 and second == third + 1:
            return self.RUN * bet
        return 0.0


class EvenOdd(Game):
    """Guess whether the casino's number from 1 to 10 is even or odd."""

    name = "Par Impar"
    EVEN = 0
    ODD = 1
    LOWEST = 1
    HIGHEST = 10
    WIN_MULTIPLIER = 2

    def rules(self) -> str:
        return (
            "REGLAS PAR O IMPAR\n"
            "1) El jugador apuesta a si el numero del casino sera par o impar\n"
            "2) El casino genera un numero entre 1 y 10\n"
            "3) Si aciertas ganas el doble Si no, pierdes todo"
        )

    def play(self, bet: float, ask: Ask, say: Say) -> float:
        say("Apostarás a:")
        say("0. Par")
        say("1. Impar")
        choice = _ask_int(ask, "")
        casino_number = self.rng.randint(self.LOWEST, self.HIGHEST)
        say(f"El numero generado por el casino es: {casino_number}")
        return self.payout(choice, casino_number, bet)

    def payout(self, choice: int, casino_number: int, bet: float) -> float:
        """Double the bet when the parity guess is right, else nothing."""
        is_even = casino_number % 2 == 0
        if (is_even and choice == self.EVEN) or (not is_even and choice == self.ODD):
            return self.WIN_MULTIPLIER * bet
        return 0.0