from pathlib import Path

import yaml

from gridmix.fetch_generation import DEFAULT_TIMEOUT, GENERATION_URL

# Path to the bundled default config within the package
PACKAGE_DIR    = Path(__file__).resolve().parent
BUNDLED_CONFIG = PACKAGE_DIR / "configs" / "gridmix.yml"


def load_config(path: Path | None = None) -> dict:
    """
    Read the YAML config at `path` (or the bundled one) and return the
    API settings with defaults filled in:
      {"base_url": str, "timeout": float}
    Raises OSError / yaml.YAMLError / ValueError on an unusable file.
    """
    config = Path(path) if path else BUNDLED_CONFIG
    cfg = yaml.safe_load(config.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Expected a mapping at the top of {config}")

    api = cfg.get("api") or {}
    return {
        "base_url": str(api.get("base_url") or GENERATION_URL),
        "timeout":  float(api.get("timeout", DEFAULT_TIMEOUT)),
    }
