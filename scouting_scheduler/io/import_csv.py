"""CSV import of personnel rosters."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from scouting_scheduler.domain.models import Personnel

logger = logging.getLogger(__name__)

_ROLE_ALIASES = {
    "lead": "lead_scouters",
    "lead scouter": "lead_scouters",
    "lead_scouter": "lead_scouters",
    "leadscouter": "lead_scouters",
    "scouter": "scouters",
    "camera": "cameras",
    "camera operator": "cameras",
    "camera_operator": "cameras",
}


def import_personnel_csv(csv_path: str | Path) -> Personnel:
    """
    Read a ``role,name`` roster CSV into Personnel.

    Rows keep file order inside each roster. Blank names are kept as blank
    so the validator can report them.

    Args:
        csv_path: Path to the roster CSV

    Returns:
        Personnel with the three rosters

    Raises:
        ValueError: If a column is missing or a role is not recognised
    """
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)

    # Normalize column names
    df.columns = df.columns.str.lower().str.strip()
    missing = {"role", "name"} - set(df.columns)
    if missing:
        raise ValueError(f"Personnel CSV missing column(s): {', '.join(sorted(missing))}")

    df["role"] = df["role"].str.strip().str.lower()
    df["name"] = df["name"].str.strip()

    unknown = sorted(set(df["role"]) - set(_ROLE_ALIASES))
    if unknown:
        raise ValueError(f"Unknown role(s) in personnel CSV: {', '.join(unknown)}")

    rosters: Dict[str, List[str]] = {"lead_scouters": [], "scouters": [], "cameras": []}
    for _, row in df.iterrows():
        rosters[_ROLE_ALIASES[row["role"]]].append(row["name"])

    logger.info(
        "Imported %d lead scouters, %d scouters, %d cameras from %s",
        len(rosters["lead_scouters"]), len(rosters["scouters"]), len(rosters["cameras"]), csv_path,
    )
    return Personnel(**rosters)
