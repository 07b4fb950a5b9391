"""Engine configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings."""

    # Path serialization
    PATH_PRECISION: int = 2  # Decimals kept in morphed/rescaled path data

    # Bounding boxes
    CLIP_PLACEHOLDER_BOX: tuple[float, float, float, float] = (-50.0, -50.0, 100.0, 100.0)

    # Interaction
    MIN_SCALE_SIZE: float = 1.0  # Smallest width/height a scale gesture produces
    SINGULAR_EPSILON: float = 1e-10  # |det| below this counts as singular
    ROTATION_SNAP_DEGREES: float = 15.0

    # Clips
    MAX_CLIP_DEPTH: int = 32  # Nesting guard for recursive clip resolution

    # Playback
    DEFAULT_FRAME_RATE: float = 30.0

    model_config = {"env_prefix": "TWEENSTAG_"}


settings = Settings()
