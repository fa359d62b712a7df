import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Configuração geral
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def _ler_numero(nome: str, padrao, tipo=float):
    """Lê um número do ambiente; valor malformado cai no padrão."""
    bruto = os.getenv(nome)
    if bruto is None or not bruto.strip():
        return padrao
    try:
        return tipo(bruto.strip())
    except ValueError:
        logger.warning("%s=%r inválido; usando %r", nome, bruto, padrao)
        return padrao


# Valores iniciais exibidos nos formulários
SALARIO_PADRAO = _ler_numero("FERIAS_SALARIO_PADRAO", 5000.0)
DIAS_FERIAS_PADRAO = _ler_numero("FERIAS_DIAS_PADRAO", 20, int)
DIAS_VENDIDOS_PADRAO = _ler_numero("FERIAS_VENDIDOS_PADRAO", 10, int)
PLR_PERCENTUAL_PADRAO = _ler_numero("FERIAS_PLR_PADRAO", 100.0)


def configurar_logging() -> None:
    """Configura o logging raiz dos shells (CLI / Streamlit)."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
