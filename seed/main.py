# seed/main.py
#
# Seed orchestrator: generates the back office dataset and builds the DuckDB
# database served by the API.
#
# Design decisions:
#   - run_seed is the single entry point. It accepts a SeedConfig and an
#     optional reference timestamp so tests get a deterministic dataset.
#   - Strict order: generate + stage each table, validate completude, build
#     DuckDB atomically (which re-checks the roster rule in SQL).
#   - Every step logs progress to stdout via seed.log.
#
# Invariant: the DuckDB file is never replaced unless every staging file was
# written, completude passed and every roster satisfies the location rule.
from __future__ import annotations

import random
from datetime import datetime, timezone
from pathlib import Path

from api.domain.usuario.enums import PerfilUsuario
from seed.config import SeedConfig, load_config
from seed.generate.localidades import gerar_localidades
from seed.generate.pagamentos import gerar_pagamentos
from seed.generate.servicos import gerar_servicos
from seed.generate.usuarios import gerar_usuarios, usuarios_de
from seed.log import log
from seed.output.build_duckdb import build_duckdb, validate_tables
from seed.output.completude import validar_completude
from seed.staging.parquet_writer import write_parquet


def run_seed(config: SeedConfig, *, referencia: datetime | None = None) -> Path:
    """Generate the dataset and produce the DuckDB database.

    Args:
        config:     Seed configuration with paths, sizes and random seed.
        referencia: "Now" for payment dates. Defaults to the current UTC time.

    Returns:
        Path to the final DuckDB database file.

    Raises:
        seed.output.completude.CompletudeError: if a required staging file is
            missing or empty.
        seed.output.build_duckdb.InvarianteEquipeError: if a roster breaks the
            location rule.
    """
    rng = random.Random(config.random_seed)
    momento = referencia or datetime.now(timezone.utc)
    staging_dir = config.staging_dir
    staging_dir.mkdir(parents=True, exist_ok=True)

    log("Generating localidades...")
    localidades_df = gerar_localidades()
    write_parquet(localidades_df, staging_dir / "localidades.parquet")
    log(f"  Localidades: {len(localidades_df):,} rows")

    log("Generating usuarios...")
    usuarios_df = gerar_usuarios(
        localidades_df["pk_localidade"].to_list(),
        {
            PerfilUsuario.ADMIN: config.qtd_admins,
            PerfilUsuario.AGENCY: config.qtd_agencias,
            PerfilUsuario.SUPPLIER: config.qtd_fornecedores,
            PerfilUsuario.CUSTOMER: config.qtd_clientes,
        },
        rng,
    )
    write_parquet(usuarios_df, staging_dir / "usuarios.parquet")
    log(f"  Usuarios: {len(usuarios_df):,} rows")
    usuarios = usuarios_de(usuarios_df)

    log("Generating servicos and equipes...")
    servicos_df, equipes_df = gerar_servicos(localidades_df, usuarios, config.qtd_servicos, rng)
    write_parquet(servicos_df, staging_dir / "servicos.parquet")
    write_parquet(equipes_df, staging_dir / "equipes.parquet")
    log(f"  Servicos: {len(servicos_df):,} rows, equipes: {len(equipes_df):,} associations")

    log("Generating pagamentos...")
    pagamentos_df = gerar_pagamentos(usuarios, config.qtd_pagamentos, momento, rng)
    write_parquet(pagamentos_df, staging_dir / "pagamentos.parquet")
    log(f"  Pagamentos: {len(pagamentos_df):,} rows")

    log("Validating completude...")
    validar_completude(staging_dir)

    log("Building DuckDB...")
    output_path = build_duckdb(staging_dir, config.duckdb_output_path)
    for tabela, total in sorted(validate_tables(output_path).items()):
        log(f"  {tabela}: {total:,} rows")
    log(f"Done. DuckDB written to: {output_path}")
    return output_path


def main() -> None:
    run_seed(load_config())


if __name__ == "__main__":
    main()
