"""The casino: its registered players and the games they can play."""

from __future__ import annotations

import random
from typing import Dict, List, Optional

from .games import Ask, EvenOdd, Game, HigherThan13, Say, Slots, TwoColors
from .player import Player

PESOS_PER_GONZO = 100
MINIMUM_BET = 1


class CasinoError(Exception):
    """Raised when a casino operation cannot be carried out."""


class Casino:
    """Keeps players by id and runs rounds of the available games."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.players: Dict[int, Player] = {1: Player(1, "Pedro rodriguez", 500)}
        self.games: List[Game] = [
            HigherThan13(rng),
            TwoColors(rng),
            Slots(rng),
            EvenOdd(rng),
        ]

    @staticmethod
    def pesos_to_gonzos(pesos: float) -> float:
        """Convert an amount of pesos into gonzos."""
        return pesos / PESOS_PER_GONZO

    def has_player(self, player_id: int) -> bool:
        """Return whether a player with this id is registered."""
        return player_id in self.players

    def add_player(self, player_id: int, name: str, pesos: float) -> Player:
        """Register a new player whose pesos are converted into gonzos."""
        if self.has_player(player_id):
            raise CasinoError("El jugador con la identificacion recibida ya existe")
        if pesos <= 0:
            raise CasinoError("El dinero debe ser mayor que cero")
        player = Player(player_id, name, self.pesos_to_gonzos(pesos))
        self.players[player_id] = player
        return player

    def withdraw_player(self, player_id: int) -> Player:
        """Remove a player from the casino and return it."""
        try:
            return self.players.pop(player_id)
        except KeyError:
            raise CasinoError(
                "El jugador con la identificacion recibida NO existe"
            ) from None

    def get_player(self, player_id: int) -> Player:
        """Return the player with this id."""
        try:
            return self.players[player_id]
        except KeyError:
            raise CasinoError(
                "El jugador con la identificacion recibida NO existe"
            ) from None

    def get_game(self, game_id: int) -> Optional[Game]:
        """Return the game numbered from 1, or None if there is no such game."""
        if 0 < game_id <= len(self.games):
            return self.games[game_id - 1]
        return None

    def can_continue(self, player_id: int, bet: float) -> bool:
        """Return whether the player has enough gonzos to cover the bet."""
        return self.get_player(player_id).gonzos >= bet

    def play(self, game_id: int, player_id: int, bet: float, ask: Ask, say: Say) -> float:
        """Play a round and return the gonzos won (positive) or lost (negative)."""
        if bet < MINIMUM_BET:
            raise CasinoError("Debe apostar al menos 1 gonzo")
        if not self.has_player(player_id):
            raise CasinoError(
                "El jugador con la identificacion recibida NO existe, no es posible jugar"
            )
        game = self.get_game(game_id)
        if game is None:
            raise CasinoError("NO existe el juego que desea jugar")
        if not self.can_continue(player_id, bet):
            raise CasinoError("No tienes saldo suficiente para jugar")

        player = self.players[player_id]
        won = game.play(bet, ask, say) - bet
        player.update_gonzos(won)
        player.add_game()
        return won

    def recharge(self, player_id: int, pesos: float) -> float:
        """Add pesos, converted into gonzos, to a player's balance."""
        player = self.get_player(player_id)
        if pesos < 0:
            raise CasinoError("El dinero a recargar no puede ser negativo")
        gonzos = self.pesos_to_gonzos(pesos)
        player.update_gonzos(gonzos)
        return gonzos