"""Text menu for running the casino from a console."""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from .casino import Casino, CasinoError
from .games import Ask, Say

T = TypeVar("T")

MENU = (
    "Menu\n"
    "1. Agregar jugador \n"
    "2. Jugar\n"
    "3. Consultar jugador  \n"
    "4. Recargar gonzos \n"
    "5. Retirar jugador casino \n"
    "0. Salir\n"
)

GAME_MENU = (
    "Elija el juego: \n"
    "1. Mayor a 13.\n"
    "2. Dos colores.\n"
    "3. Slots\n"
    "4. Par Impar"
)


class View:
    """Interactive menu over a casino, driven by ``ask`` and ``say`` callables."""

    def __init__(
        self,
        casino: Optional[Casino] = None,
        ask: Optional[Ask] = None,
        say: Optional[Say] = None,
    ) -> None:
        self.casino = casino if casino is not None else Casino()
        self.ask: Ask = ask if ask is not None else input
        self.say: Say = say if say is not None else print

    def _ask_value(self, prompt: str, convert: Callable[[str], T]) -> T:
        while True:
            try:
                return convert(self.ask(prompt).strip())
            except ValueError:
                continue

    def _ask_int(self, prompt: str) -> int:
        return self._ask_value(prompt, int)

    def _ask_float(self, prompt: str) -> float:
        return self._ask_value(prompt, float)

    def run(self) -> None:
        """Show the main menu until the user chooses to leave."""
        actions = {
            1: self._add_player,
            2: self._play,
            3: self._show_player,
            4: self._recharge,
            5: self._withdraw_player,
        }
        while True:
            self.say(MENU)
            option = self._ask_int("Digita el numero: ")
            if option == 0:
                self.say("Hasta pronto !")
                return
            action = actions.get(option)
            if action is None:
                self.say("No hay ninguna opcion para ese numero")
            else:
                action()

    def _add_player(self) -> None:
        name = self.ask("Ingrese el nombre del jugador: ")
        while True:
            player_id = self._ask_int("Ingrese el id del jugador: ")
            if not self.casino.has_player(player_id):
                break
            self.say("El jugador con la identificacion recibida ya existe")
        while True:
            pesos = self._ask_float("Ingrese el dinero en pesos: ")
            if pesos > 0:
                break
        try:
            self.casino.add_player(player_id, name, pesos)
        except CasinoError as error:
            self.say(f"ERROR con parámetros: {error}")
            return
        self.say("Jugador agregado exitosamente")

    def _play(self) -> None:
        player_id = self._ask_int("Ingrese el id del jugador para el que quiere jugar: ")
        bet = self._ask_float("Cuantos gonzos desea apostar: ")
        self.say(GAME_MENU)
        game_id = self._ask_int("Opcion: ")
        game = self.casino.get_game(game_id)
        if game is not None:
            self.say(game.rules())
        try:
            won = self.casino.play(game_id, player_id, bet, self.ask, self.say)
        except CasinoError as error:
            self.say(str(error))
            return
        text = "Haz ganado!: " if won > 0 else "Haz perdido :(!: "
        self.say(f"{text}{won:g} Gonzos")

    def _show_player(self) -> None:
        player_id = self._ask_int("Ingrese el id del jugador: ")
        try:
            self.say(self.casino.get_player(player_id).describe())
        except CasinoError as error:
            self.say(str(error))

    def _withdraw_player(self) -> None:
        player_id = self._ask_int("Ingrese el id del jugador: ")
        try:
            self.say(self.casino.get_player(player_id).describe())
            self.casino.withdraw_player(player_id)
        except CasinoError as error:
            self.say(str(error))
            return
        self.say("Jugador retirado con exito.")

    def _recharge(self) -> None:
        player_id = self._ask_int("Ingrese el id del jugador: ")
        if not self.casino.has_player(player_id):
            self.say("El jugador con la identificacion recibida NO existe")
            return
        while True:
            pesos = self._ask_float("Ingrese la cantidad de dinero  a recargar: ")
            if pesos >= 0:
                break
        try:
            self.casino.recharge(player_id, pesos)
        except CasinoError as error:
            self.say(str(error))
            return
        self.say("Recarga realizada con exito.")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the casino menu on the console."""
    try:
        View().run()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0