from pathlib import Path

import yaml

from game_save.logger import logger
from game_save.model import SaveRecord

module_logger = logger.getChild("samples")


def load_samples(yaml_path: Path | str | None = None) -> dict[str, SaveRecord]:
    """
    Load the named sample save records from a YAML file.

    Defaults to the samples.yaml shipped with the package. The file holds a SAVES mapping
    of case name -> record fields. Negative quantities are accepted here on purpose, they
    are what validate() is there to catch.
    """
    if yaml_path is None:
        yaml_path = Path(__file__).parent / "samples.yaml"
    else:
        if isinstance(yaml_path, str):
            yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Samples file not found at '{yaml_path}'!")

    with open(yaml_path, "r", encoding="utf-8") as file:
        data: dict = yaml.safe_load(file) or {}

    saves_data: dict = data.get("SAVES", {}) or {}
    samples = {name: SaveRecord.model_validate(fields) for name, fields in saves_data.items()}
    module_logger.debug(f"Loaded {len(samples)} sample saves from {yaml_path}")
    return samples
