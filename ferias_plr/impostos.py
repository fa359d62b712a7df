from dataclasses import dataclass
from typing import Tuple

# Cada faixa: (limite superior, alíquota, parcela a deduzir)
Faixa = Tuple[float, float, float]


# =========================
# Tabelas oficiais (2024)
# =========================

@dataclass(frozen=True)
class TabelasImpostos2024:
    # --- INSS (contribuição progressiva, por fatias) ---
    INSS_teto: float = 7786.02
    INSS_faixas: Tuple[Faixa, ...] = (
        (1412.00, 0.075, 0.0),
        (2666.68, 0.09,  0.0),
        (4000.03, 0.12,  0.0),
        (7786.02, 0.14,  0.0),
    )

    # --- IRRF mensal (sem dependentes) ---
    IRRF_faixas: Tuple[Faixa, ...] = (
        (2259.20,      0.00,   0.00),
        (2826.65,      0.075, 169.44),
        (3751.05,      0.15,  381.44),
        (4664.68,      0.225, 662.77),
        (float("inf"), 0.275, 896.00),
    )

    # --- IRRF exclusivo da PLR ---
    IRRF_PLR_faixas: Tuple[Faixa, ...] = (
        (7640.80,      0.00,     0.00),
        (9922.28,      0.075,  573.06),
        (13167.00,     0.15,  1317.23),
        (16380.38,     0.225, 2304.76),
        (float("inf"), 0.275, 3123.78),
    )


TABELAS_2024 = TabelasImpostos2024()


# =========================
# Avaliação das faixas
# =========================

def _faixa_para(valor: float, faixas: Tuple[Faixa, ...]) -> Faixa:
    """Primeira faixa cujo limite não é ultrapassado; senão, a última (aberta)."""
    for faixa in faixas:
        if valor <= faixa[0]:
            return faixa
    return faixas[-1]


def calcular_inss(base: float, tabelas: TabelasImpostos2024 = TABELAS_2024) -> float:
    """
    INSS progressivo: cada alíquota incide só sobre a fatia do salário
    dentro da sua faixa. A base é limitada ao teto antes do cálculo.
    """
    if base <= 0:
        return 0.0

    salario = min(base, tabelas.INSS_teto)
    inss = 0.0
    piso = 0.0
    for limite, aliq, _ in tabelas.INSS_faixas:
        if salario <= piso:
            break
        inss += (min(salario, limite) - piso) * aliq
        piso = limite
    return inss


def calcular_irrf(base: float, tabelas: TabelasImpostos2024 = TABELAS_2024) -> float:
    """IRRF mensal: base * alíquota - dedução da faixa, nunca negativo."""
    if base <= 0:
        return 0.0
    _, aliq, ded = _faixa_para(base, tabelas.IRRF_faixas)
    return max(0.0, base * aliq - ded)


def calcular_irrf_plr(valor_plr: float, tabelas: TabelasImpostos2024 = TABELAS_2024) -> float:
    """IR exclusivo da PLR (tributação separada do salário, sem INSS)."""
    _, aliq, ded = _faixa_para(valor_plr, tabelas.IRRF_PLR_faixas)
    return valor_plr * aliq - ded
