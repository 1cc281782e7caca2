# seed/config.py
#
# Seed pipeline configuration loaded from environment variables.
#
# Design decisions:
#   - Frozen dataclass (not pydantic Settings): the seed is an offline batch
#     process and pydantic is reserved for the API layer.
#   - SEED_RANDOM_SEED makes a run reproducible. Unset means a fresh random
#     dataset on every run.
#   - Paths default to seed/data relative to this file so the seed works out
#     of the box after a fresh checkout.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_SEED_DIR = Path(__file__).parent


@dataclass(frozen=True)
class SeedConfig:
    """Immutable seed configuration.

    Invariants:
      - qtd_* fields are positive integers.
      - data_dir and duckdb_output_path are Path objects.
    """

    data_dir: Path
    duckdb_output_path: Path
    random_seed: int | None = None
    qtd_admins: int = 2
    qtd_agencias: int = 8
    qtd_fornecedores: int = 12
    qtd_clientes: int = 20
    qtd_servicos: int = 10
    qtd_pagamentos: int = 25

    def __post_init__(self) -> None:
        for nome in (
            "qtd_admins",
            "qtd_agencias",
            "qtd_fornecedores",
            "qtd_clientes",
            "qtd_servicos",
            "qtd_pagamentos",
        ):
            if getattr(self, nome) <= 0:
                raise ValueError(f"{nome} must be a positive integer")

    @property
    def staging_dir(self) -> Path:
        """Directory for generated Parquet staging files."""
        return self.data_dir / "staging"


def load_config() -> SeedConfig:
    """Build SeedConfig from environment variables.

    Raises:
        ValueError: if a numeric variable is not an integer or not positive.
    """
    data_dir = Path(os.environ.get("SEED_DATA_DIR", str(_SEED_DIR / "data")))
    duckdb_output_path = Path(
        os.environ.get(
            "SEED_DUCKDB_OUTPUT_PATH",
            str(data_dir / "output" / "backoffice.duckdb"),
        )
    )
    seed_raw = os.environ.get("SEED_RANDOM_SEED")

    return SeedConfig(
        data_dir=data_dir,
        duckdb_output_path=duckdb_output_path,
        random_seed=int(seed_raw) if seed_raw else None,
        qtd_servicos=int(os.environ.get("SEED_QTD_SERVICOS", "10")),
        qtd_pagamentos=int(os.environ.get("SEED_QTD_PAGAMENTOS", "25")),
    )
