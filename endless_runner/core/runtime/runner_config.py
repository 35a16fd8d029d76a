"""
runner_config.py
----------------
Typed view over the entity tuning in config/runner.json.

The JSON file is merged over DEFAULT_RUNNER_CONFIG, so a partial file (or a
missing one) still yields a complete configuration.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.runtime.game_settings import Assets
from endless_runner.core.services.config_manager import load_config


class RunnerConfigError(ValueError):
    """Raised when the tuning data is structurally invalid."""


DEFAULT_RUNNER_CONFIG = {
    "player": {
        "sprite": {"image": "player.png", "frame_width": 200, "frame_height": 200, "scale": 0.7},
        "start_x": 100,
        "speed": 5,
        "jump_impulse": 25,
        "weight": 1,
        "fps": 20,
        "run_animation": {"row": 0, "max_frame": 8},
        "jump_animation": {"row": 1, "max_frame": 6},
        "hitbox": {"offset": [0, 15], "radius_divisor": 3},
    },
    "enemy": {
        "sprite": {"image": "enemy.png", "frame_width": 160, "frame_height": 119, "scale": 1.0},
        "speed": 8,
        "fps": 20,
        "max_frame": 5,
        "hitbox": {"offset": [-20, 15], "radius_divisor": 3},
    },
    "background": {"image": "background.png", "width": 2400, "height": 720, "speed": 7},
    "spawn": {"interval": 500, "initial_extra": [500, 1500], "extra": [400, 1400]},
    "input": {"touch_threshold": 30},
}

_REQUIRED_SECTIONS = ("player", "enemy", "background", "spawn", "input")


# ===========================================================
# Tuning Records
# ===========================================================

@dataclass(frozen=True)
class SpriteSheet:
    image: str
    frame_width: float
    frame_height: float
    scale: float = 1.0

    @property
    def width(self) -> float:
        """On-screen width of one frame."""
        return self.frame_width * self.scale

    @property
    def height(self) -> float:
        return self.frame_height * self.scale


@dataclass(frozen=True)
class AnimationRow:
    row: int
    max_frame: int


@dataclass(frozen=True)
class HitboxSpec:
    offset: Tuple[float, float]
    radius_divisor: float


@dataclass(frozen=True)
class PlayerTuning:
    sprite: SpriteSheet
    start_x: float
    speed: float
    jump_impulse: float
    weight: float
    fps: float
    run_animation: AnimationRow
    jump_animation: AnimationRow
    hitbox: HitboxSpec


@dataclass(frozen=True)
class EnemyTuning:
    sprite: SpriteSheet
    speed: float
    fps: float
    max_frame: int
    hitbox: HitboxSpec


@dataclass(frozen=True)
class BackgroundTuning:
    image: str
    width: float
    height: float
    speed: float


@dataclass(frozen=True)
class SpawnTuning:
    interval: float
    initial_extra: Tuple[float, float]
    extra: Tuple[float, float]


@dataclass(frozen=True)
class InputTuning:
    touch_threshold: float


# ===========================================================
# Runner Config
# ===========================================================

@dataclass(frozen=True)
class RunnerConfig:
    player: PlayerTuning
    enemy: EnemyTuning
    background: BackgroundTuning
    spawn: SpawnTuning
    input: InputTuning

    @classmethod
    def from_dict(cls, data: dict) -> "RunnerConfig":
        """
        Build a RunnerConfig from a (merged) tuning dictionary.

        Raises:
            RunnerConfigError: if a section or field is missing or malformed
        """
        missing = [s for s in _REQUIRED_SECTIONS if s not in data]
        if missing:
            raise RunnerConfigError(f"runner config missing sections: {missing}")

        try:
            player = data["player"]
            enemy = data["enemy"]
            return cls(
                player=PlayerTuning(
                    sprite=SpriteSheet(**player["sprite"]),
                    start_x=player["start_x"],
                    speed=player["speed"],
                    jump_impulse=player["jump_impulse"],
                    weight=player["weight"],
                    fps=player["fps"],
                    run_animation=AnimationRow(**player["run_animation"]),
                    jump_animation=AnimationRow(**player["jump_animation"]),
                    hitbox=_hitbox(player["hitbox"]),
                ),
                enemy=EnemyTuning(
                    sprite=SpriteSheet(**enemy["sprite"]),
                    speed=enemy["speed"],
                    fps=enemy["fps"],
                    max_frame=enemy["max_frame"],
                    hitbox=_hitbox(enemy["hitbox"]),
                ),
                background=BackgroundTuning(**data["background"]),
                spawn=SpawnTuning(
                    interval=data["spawn"]["interval"],
                    initial_extra=_range(data["spawn"]["initial_extra"]),
                    extra=_range(data["spawn"]["extra"]),
                ),
                input=InputTuning(**data["input"]),
            )
        except (KeyError, TypeError) as e:
            raise RunnerConfigError(f"invalid runner config: {e}") from e

    @classmethod
    def load(cls, filename: Optional[str] = None, strict: bool = False) -> "RunnerConfig":
        """Load config/runner.json (or another file) over the defaults."""
        data = load_config(filename or Assets.RUNNER_CONFIG, DEFAULT_RUNNER_CONFIG, strict=strict)
        config = cls.from_dict(data)
        DebugLogger.init_sub(
            f"Runner config: spawn every {config.spawn.interval}ms "
            f"+ {config.spawn.extra[0]}-{config.spawn.extra[1]}ms",
        )
        return config

    @classmethod
    def default(cls) -> "RunnerConfig":
        return cls.from_dict(DEFAULT_RUNNER_CONFIG)


def _hitbox(data) -> HitboxSpec:
    x, y = data["offset"]
    return HitboxSpec(offset=(x, y), radius_divisor=data["radius_divisor"])


def _range(values) -> Tuple[float, float]:
    low, high = values
    if high < low:
        raise RunnerConfigError(f"range upper bound {high} below lower bound {low}")
    return low, high
