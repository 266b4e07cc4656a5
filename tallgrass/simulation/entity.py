"""Entities (actors) and their kind-specific payloads.

The set of kinds is closed: every entity is either a TRAINER or a POKEMON,
with a payload of the matching type. Entities are owned by a Board, which
assigns entity_id when they are added.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tallgrass.config import PLAYER_HP, PLAYER_NAME, PLAYER_SPEED
from tallgrass.simulation.geometry import Point
from tallgrass.simulation.tiles import Glyph


class EntityType(IntEnum):
    TRAINER = 0
    POKEMON = 1


@dataclass(frozen=True, slots=True)
class PokemonSpecies:
    name: str
    glyph: Glyph
    hp: int
    speed: float


SPECIES: dict[str, PokemonSpecies] = {
    "Pidgey": PokemonSpecies("Pidgey", Glyph("P", (215, 175, 95)), 30, 1.0),
    "Rattata": PokemonSpecies("Rattata", Glyph("R", (175, 95, 215)), 25, 1.0),
    "Caterpie": PokemonSpecies("Caterpie", Glyph("C", (95, 215, 95)), 35, 0.5),
    "Metapod": PokemonSpecies("Metapod", Glyph("M", (135, 215, 95)), 40, 0.25),
}


@dataclass(slots=True)
class TrainerData:
    name: str
    player: bool = False


@dataclass(slots=True)
class PokemonData:
    species: PokemonSpecies


@dataclass(slots=True, eq=False)
class Entity:
    """A mobile actor on the board.

    move_timer and turn_timer are energy budgets: an entity may act once
    its turn_timer is <= 0. Every round the scheduler charges both timers
    by TURN_TIMER * speed, and every action pays them back.
    """
    entity_type: EntityType
    data: TrainerData | PokemonData
    pos: Point
    glyph: Glyph
    speed: float
    max_hp: int
    cur_hp: int
    entity_id: int = -1     # assigned by Board.add_entity
    move_timer: int = 0
    turn_timer: int = 0
    removed: bool = False

    @property
    def is_player(self) -> bool:
        return isinstance(self.data, TrainerData) and self.data.player

    @property
    def name(self) -> str:
        if isinstance(self.data, TrainerData):
            return self.data.name
        return self.data.species.name


def make_trainer(
    pos: Point,
    name: str = PLAYER_NAME,
    player: bool = False,
    hp: int = PLAYER_HP,
    speed: float = PLAYER_SPEED,
) -> Entity:
    return Entity(
        entity_type=EntityType.TRAINER,
        data=TrainerData(name=name, player=player),
        pos=pos,
        glyph=Glyph("@"),
        speed=speed,
        max_hp=hp,
        cur_hp=hp,
    )


def make_pokemon(species: str, pos: Point) -> Entity:
    """Create a Pokemon of a species from SPECIES. Raises KeyError."""
    data = SPECIES[species]
    return Entity(
        entity_type=EntityType.POKEMON,
        data=PokemonData(species=data),
        pos=pos,
        glyph=data.glyph,
        speed=data.speed,
        max_hp=data.hp,
        cur_hp=data.hp,
    )
