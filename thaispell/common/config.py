import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BUNDLED_CORPUS_PATH = Path(__file__).resolve().parents[1] / "data" / "tnc_freq.txt"


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    corpus_path: str = os.getenv("THAISPELL_CORPUS_PATH", str(BUNDLED_CORPUS_PATH))
    min_freq: int = int(os.getenv("THAISPELL_MIN_FREQ", "2"))
    min_len: int = int(os.getenv("THAISPELL_MIN_LEN", "2"))
    max_len: int = int(os.getenv("THAISPELL_MAX_LEN", "40"))
    timing: bool = _env_flag("THAISPELL_TIMING")
    export_path: str = os.getenv("THAISPELL_EXPORT_PATH", "/tmp/thaispell_dictionary.tsv")


settings = Settings()
