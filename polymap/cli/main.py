import typer
from typing import Optional
from pathlib import Path
from rich.console import Console
from rich.table import Table

from polymap.config.logging_setup import setup_logging
from polymap.providers.base import ProviderType
from polymap.providers.manager import get_manager
from polymap.providers.models import GeoPoint, MapConfig, PolylineConfig
from polymap.providers.settings import get_settings
from polymap.services.map_driver import MapDriver

app = typer.Typer(help="CLI para gerar mapas interativos com diferentes provedores")
console = Console()


def build_default_config(container: str, style: Optional[str] = None) -> MapConfig:
    """
    Monta o MapConfig padrão a partir das configurações de ambiente.

    Args:
        container: Identificador da superfície de exibição
        style: URL opcional do documento de estilo

    Returns:
        MapConfig validado
    """
    settings = get_settings()
    return MapConfig(
        container_handle=container,
        center=GeoPoint(
            latitude=settings.map_default_latitude,
            longitude=settings.map_default_longitude,
        ),
        zoom=settings.map_default_zoom,
        style_reference=style,
    )


@app.command()
def providers():
    """
    Lista os provedores de mapa registrados.
    """
    manager = get_manager()
    try:
        default = manager.default_provider
    except ValueError as e:
        console.print(f"[bold red]Erro: {str(e)}")
        raise typer.Exit(code=1)

    table = Table(show_header=True, header_style="bold green")
    table.add_column("Provedor")
    table.add_column("Padrão")

    for provider_type in manager.registered_providers:
        table.add_row(
            provider_type.value,
            "sim" if provider_type == default else ""
        )

    console.print(table)


@app.command()
def demo(
    provider: Optional[str] = typer.Option(None, help="Provedor inicial (pin, layer). Padrão: MAP_PROVIDER"),
    output_file: Path = typer.Option(Path("map.html"), help="Arquivo HTML de saída"),
    container: str = typer.Option("map", help="Identificador do container de exibição"),
    style: Optional[str] = typer.Option(None, help="URL do documento de estilo (apenas provedor layer)"),
    switch: bool = typer.Option(False, help="Trocar de provedor antes de salvar"),
):
    """
    Gera um mapa de demonstração com um marcador no centro e uma linha.
    """
    try:
        provider_type = ProviderType.parse(provider) if provider else None
        config = build_default_config(container, style)
        driver = MapDriver(config, provider_type=provider_type, mark_center=True)
    except ValueError as e:
        console.print(f"[bold red]Erro: {str(e)}")
        raise typer.Exit(code=1)

    driver.setup()
    if switch:
        driver.switch_provider()

    center = config.center
    driver.add_polyline(PolylineConfig(
        path=[
            center,
            GeoPoint(latitude=center.latitude + 0.01, longitude=center.longitude + 0.01),
        ],
        stroke_color="#ff0000",
        stroke_weight=3,
    ))

    driver.active_map.save(output_file)
    console.print(
        f"[green]Mapa [bold]{driver.provider_type.value}[/] salvo em: [bold]{output_file}[/]"
    )


def main():
    setup_logging()
    app()


if __name__ == "__main__":
    main()
