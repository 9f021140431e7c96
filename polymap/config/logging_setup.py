"""
Setup de logging configurável para o polymap.

Carrega configuração de logs a partir de arquivo YAML.
"""
import logging
import logging.config
from pathlib import Path
from typing import Optional, Union

import yaml


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    config_path: Optional[Union[str, Path]] = None,
    default_level: int = logging.INFO
):
    """
    Configura o sistema de logging a partir de arquivo YAML.

    Args:
        config_path: Caminho para o arquivo de configuração YAML.
                     Se None, usa POLYMAP_LOG_CONFIG ou o arquivo padrão
                     em polymap/config/logging_config.yaml
        default_level: Nível de logging padrão caso não consiga carregar a configuração
    """
    if config_path is None:
        from polymap.providers.settings import get_settings
        config_path = get_settings().log_config_path

    if config_path is None:
        # Usar arquivo de configuração padrão
        config_path = Path(__file__).parent / "logging_config.yaml"

    config_path = Path(config_path)

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)

            logging.config.dictConfig(config)

            logger = logging.getLogger(__name__)
            logger.info(f"Logging configurado a partir de: {config_path}")

        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            # Fallback para configuração básica se houver erro
            logging.basicConfig(level=default_level, format=DEFAULT_FORMAT)
            logging.error(f"Erro ao carregar configuração de logging: {e}")
            logging.warning("Usando configuração de logging padrão")
    else:
        # Arquivo não existe, usar configuração básica
        logging.basicConfig(level=default_level, format=DEFAULT_FORMAT)
        logging.warning(f"Arquivo de configuração não encontrado: {config_path}")
        logging.info("Usando configuração de logging padrão")

