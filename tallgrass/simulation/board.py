"""The board: terrain, entities, turn order, and cached vision.

All position and terrain mutations go through Board methods so the
per-entity vision cache stays coherent:

- Moving an entity dirties its own vision (scores are stored relative to
  the entity's position).
- Changing a tile's BLOCKED/OBSCURE flags dirties the vision of every
  entity whose cached scores show that cell as visible. An entry that is
  already dirty is left alone, and the visibility test reads the cached
  (possibly stale) scores rather than recomputing them.

Dirty entries are recomputed lazily on the next get_vision call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from tallgrass.config import (
    FOV_RADIUS,
    TURN_TIMER,
    VISION_INITIAL,
    VISION_LOSS_DIAGONAL,
    VISION_LOSS_OBSCURE,
    VISION_NOT_VISIBLE,
)
from tallgrass.simulation.entity import Entity, EntityType
from tallgrass.simulation.fov import fov_for_radius
from tallgrass.simulation.geometry import Grid, Point
from tallgrass.simulation.tiles import Tile, TileFlags, tile_type

logger = logging.getLogger(__name__)

_OPACITY_FLAGS = TileFlags.BLOCKED | TileFlags.OBSCURE


class Status(IntEnum):
    FREE = 0
    BLOCKED = 1    # terrain
    OCCUPIED = 2   # another entity


@dataclass(slots=True, eq=False)
class Vision:
    """Cached visibility scores for one entity.

    visibility is a (2r+1)-square grid; world point p maps to grid index
    p + offset. Scores are -1 for cells not visible and >= 0 otherwise.
    """
    offset: Point
    visibility: Grid[int]
    dirty: bool = True


class Board:
    """Owns the terrain grid, the entities, and the scheduling index."""

    def __init__(self, size: Point, fov_radius: int = FOV_RADIUS) -> None:
        self._fov = fov_for_radius(fov_radius)
        self._map: Grid[Tile] = Grid(size, tile_type("."), default=tile_type("#"))
        self._entities: list[Entity] = []
        self._entity_at_pos: dict[Point, Entity] = {}
        self._entity_index = 0
        self._next_entity_id = 0
        self._vision: dict[int, Vision] = {}
        # pokemon entity_id -> trainer entity_id
        self._trainers: dict[int, int] = {}
        self.vision_recomputes = 0

    # --- Reads -----------------------------------------------------------

    def get_size(self) -> Point:
        return self._map.size

    def contains(self, p: Point) -> bool:
        return self._map.contains(p)

    def get_status(self, p: Point) -> Status:
        if self.get_tile(p).blocked:
            return Status.BLOCKED
        if p in self._entity_at_pos:
            return Status.OCCUPIED
        return Status.FREE

    def get_tile(self, p: Point) -> Tile:
        """Tile at p. Out-of-bounds returns the tree tile."""
        return self._map.get(p)

    def get_active_entity(self) -> Entity:
        assert self._entities, "no entities on the board"
        return self._entities[self._entity_index]

    def get_entity(self, p: Point) -> Entity | None:
        return self._entity_at_pos.get(p)

    def get_entities(self) -> list[Entity]:
        """All entities in turn order. Do not mutate the returned list."""
        return self._entities

    def get_trainer(self, pokemon: Entity) -> Entity | None:
        """The trainer that owns a Pokemon, if it is still on the board."""
        trainer_id = self._trainers.get(pokemon.entity_id)
        if trainer_id is None:
            return None
        for entity in self._entities:
            if entity.entity_id == trainer_id:
                return entity
        return None

    # --- Writes ----------------------------------------------------------

    def clear_all_tiles(self) -> None:
        """Reset every cell to grass and dirty all cached vision."""
        self._map.fill(tile_type("."))
        for vision in self._vision.values():
            vision.dirty = True

    def set_tile(self, p: Point, tile: Tile) -> None:
        """Replace the tile at p. No-op out of bounds."""
        if not self._map.contains(p):
            return
        old = self._map.get(p)
        self._map.set(p, tile)
        if (old.flags & _OPACITY_FLAGS) == (tile.flags & _OPACITY_FLAGS):
            return
        for entity in self._entities:
            self._dirty_vision(entity, p)

    def add_entity(self, entity: Entity) -> None:
        """Register an entity at its current position and assign its id."""
        assert entity.pos not in self._entity_at_pos, (
            f"add_entity: {entity.pos} is already occupied"
        )
        entity.entity_id = self._next_entity_id
        self._next_entity_id += 1
        entity.removed = False
        self._entities.append(entity)
        self._entity_at_pos[entity.pos] = entity

    def move_entity(self, entity: Entity, to: Point) -> None:
        """Move an entity to an unoccupied cell and dirty its vision."""
        assert self._entity_at_pos.get(entity.pos) is entity, (
            f"move_entity: entity #{entity.entity_id} is not on the board"
        )
        assert to not in self._entity_at_pos, (
            f"move_entity: {to} is already occupied"
        )
        del self._entity_at_pos[entity.pos]
        self._entity_at_pos[to] = entity
        entity.pos = to
        self._dirty_vision(entity, None)

    def remove_entity(self, entity: Entity) -> None:
        """Remove an entity, its vision cache entry, and its relations.

        The scheduling index keeps pointing at the entity that would have
        acted next.
        """
        assert self._entity_at_pos.get(entity.pos) is entity, (
            f"remove_entity: entity #{entity.entity_id} is not on the board"
        )
        index = next(
            i for i, e in enumerate(self._entities) if e is entity
        )
        del self._entities[index]
        del self._entity_at_pos[entity.pos]
        self._vision.pop(entity.entity_id, None)

        self._trainers.pop(entity.entity_id, None)
        if entity.entity_type == EntityType.TRAINER:
            orphans = [k for k, v in self._trainers.items() if v == entity.entity_id]
            for pokemon_id in orphans:
                del self._trainers[pokemon_id]

        if index < self._entity_index:
            self._entity_index -= 1
        if self._entity_index >= len(self._entities):
            self._entity_index = 0
        entity.removed = True

    def set_trainer(self, pokemon: Entity, trainer: Entity) -> None:
        assert pokemon.entity_type == EntityType.POKEMON
        assert trainer.entity_type == EntityType.TRAINER
        assert self._entity_at_pos.get(trainer.pos) is trainer
        self._trainers[pokemon.entity_id] = trainer.entity_id

    def advance_entity(self) -> None:
        """Charge the active entity for one round, then pass the turn on."""
        if not self._entities:
            return
        entity = self._entities[self._entity_index]
        charge = round(TURN_TIMER * entity.speed)
        entity.move_timer -= charge
        entity.turn_timer -= charge
        self._entity_index = (self._entity_index + 1) % len(self._entities)

    # --- Cached field-of-vision ------------------------------------------

    def can_see(self, viewer: Entity | Vision, p: Point) -> bool:
        return self.visibility_at(viewer, p) >= 0

    def visibility_at(self, viewer: Entity | Vision, p: Point) -> int:
        vision = viewer if isinstance(viewer, Vision) else self.get_vision(viewer)
        return vision.visibility.get(p + vision.offset)

    def get_vision(self, entity: Entity) -> Vision:
        """Vision for an entity, recomputed first if it is dirty."""
        assert self._entity_at_pos.get(entity.pos) is entity, (
            f"get_vision: entity #{entity.entity_id} is not on the board"
        )
        vision = self._vision.get(entity.entity_id)
        if vision is None:
            side = 2 * self._fov.radius + 1
            vision = Vision(
                offset=Point(0, 0),
                visibility=Grid(
                    Point(side, side), VISION_NOT_VISIBLE, VISION_NOT_VISIBLE,
                ),
            )
            self._vision[entity.entity_id] = vision
        if vision.dirty:
            self._compute_vision(entity, vision)
        return vision

    def _compute_vision(self, entity: Entity, vision: Vision) -> None:
        radius = self._fov.radius
        center = Point(radius, radius)
        grid = vision.visibility
        grid.fill(VISION_NOT_VISIBLE)
        vision.offset = center - entity.pos
        pos = entity.pos

        def blocked(p: Point, prev: Point | None) -> bool:
            cell = p + center
            if prev is None:
                grid.set(cell, VISION_INITIAL)
                return False
            tile = self._map.get(pos + p)
            if tile.blocked:
                score = 0
            else:
                loss = 0
                if tile.obscure:
                    loss = VISION_LOSS_OBSCURE
                    if p.x != prev.x and p.y != prev.y:
                        loss += VISION_LOSS_DIAGONAL
                score = max(grid.get(prev + center) - loss, 0)
            if score > grid.get(cell):
                grid.set(cell, score)
            return score <= 0

        self._fov.field_of_vision(blocked)
        vision.dirty = False
        self.vision_recomputes += 1
        logger.debug("Recomputed vision for entity #%d at (%d, %d)",
                     entity.entity_id, pos.x, pos.y)

    def _dirty_vision(self, entity: Entity, target: Point | None) -> None:
        """Mark an entity's vision dirty.

        With a target, only if the cached scores show the target as visible.
        """
        vision = self._vision.get(entity.entity_id)
        if vision is None or vision.dirty:
            return
        if target is not None and not self.can_see(vision, target):
            return
        vision.dirty = True
