from .impostos import (
    TABELAS_2024,
    TabelasImpostos2024,
    calcular_inss,
    calcular_irrf,
    calcular_irrf_plr,
)
from .calc import (
    REGRAS_2024,
    RegrasCLT2024,
    EntradaFerias,
    Beneficios,
    ResultadoFerias,
    ResultadoCalculo,
    validar_entrada,
    calcular_beneficios,
    aplicar_impostos,
    calcular,
    parse_brl,
    format_brl,
)

__all__ = [
    'TABELAS_2024',
    'TabelasImpostos2024',
    'calcular_inss',
    'calcular_irrf',
    'calcular_irrf_plr',
    'REGRAS_2024',
    'RegrasCLT2024',
    'EntradaFerias',
    'Beneficios',
    'ResultadoFerias',
    'ResultadoCalculo',
    'validar_entrada',
    'calcular_beneficios',
    'aplicar_impostos',
    'calcular',
    'parse_brl',
    'format_brl',
]
