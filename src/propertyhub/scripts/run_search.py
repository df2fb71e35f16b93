"""
Script para buscar propiedades desde la terminal.

Uso:
    python -m propertyhub.scripts.run_search --query villa
    python -m propertyhub.scripts.run_search --type apartment --price-range under-10m
    python -m propertyhub.scripts.run_search --location Nairobi --demo
"""

import argparse
import logging
import sys
from typing import Optional

import structlog

from propertyhub.catalog import CatalogResult, PropertyCatalog, get_demo_properties
from propertyhub.config import get_settings
from propertyhub.filtering import PRICE_BRACKETS, FilterCriteria, filter_properties
from propertyhub.models import PROPERTY_TYPES

logger = structlog.get_logger()


def configure_logging(log_level: str) -> None:
    """Configura logging estándar + structlog con salida de consola."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Buscar propiedades disponibles")
    parser.add_argument("--query", "-q", default="", help="Texto libre (título, ubicación, descripción)")
    parser.add_argument(
        "--type",
        dest="property_type",
        choices=["all", *PROPERTY_TYPES],
        default="all",
        help="Tipo de propiedad",
    )
    parser.add_argument(
        "--price-range",
        choices=["all", *PRICE_BRACKETS],
        default="all",
        help="Rango de precio",
    )
    parser.add_argument("--location", "-l", default="", help="Substring de la ubicación")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Buscar solo en las propiedades demo (sin conectarse a Supabase)",
    )
    return parser.parse_args(argv)


def run_search(criteria: FilterCriteria, demo: bool = False) -> CatalogResult:
    """Ejecuta la búsqueda contra Supabase o contra el dataset demo."""
    if demo:
        return CatalogResult(
            filter_properties(get_demo_properties(), criteria), is_demo=True
        )
    return PropertyCatalog().search(criteria)


def format_result(result: CatalogResult) -> list[str]:
    """Una línea por propiedad más el resumen final."""
    lines = [
        f"{p.short_id:<8}  {p.title}  |  {p.location}  |  {p.display_price}"
        for p in result.properties
    ]
    summary = f"{len(result.properties)} Properties Found"
    if result.is_demo:
        summary += " (demo data)"
    lines.append(summary)
    return lines


def main(argv: Optional[list[str]] = None):
    """Entry point del script."""
    args = parse_args(argv)
    configure_logging("INFO")

    criteria = FilterCriteria(
        query=args.query,
        property_type=args.property_type,
        price_range=args.price_range,
        location=args.location,
    )

    try:
        if not args.demo:
            logging.getLogger().setLevel(get_settings().log_level.upper())
        result = run_search(criteria, demo=args.demo)
    except KeyboardInterrupt:
        logger.info("Búsqueda interrumpida por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en búsqueda", error=str(e))
        sys.exit(1)

    if result.error:
        logger.warning("Usando datos demo por error de conexión", error=result.error)

    for line in format_result(result):
        print(line)
    sys.exit(0)


if __name__ == "__main__":
    main()
