from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _int_csv(value: str) -> tuple[int, ...]:
    return tuple(int(item) for item in _split_csv(value))


@dataclass(frozen=True)
class Settings:
    debounce_ms: int = int(os.getenv("FINALMARK_DEBOUNCE_MS", "300"))
    initial_components: int = int(os.getenv("FINALMARK_INITIAL_COMPONENTS", "2"))

    target_presets: tuple[int, ...] = _int_csv(os.getenv("FINALMARK_TARGET_PRESETS", "90,80,70,60"))
    scenario_presets: tuple[int, ...] = _int_csv(os.getenv("FINALMARK_SCENARIO_PRESETS", "0,50,70,85,100"))

    web_mode: bool = os.getenv("FINALMARK_WEB", "0") == "1"
    port: int = int(os.getenv("PORT", "8550"))
    log_level: str = os.getenv("FINALMARK_LOG_LEVEL", "INFO").upper()

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


settings = Settings()
