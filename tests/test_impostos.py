import pytest

from ferias_plr.impostos import (
    TABELAS_2024,
    calcular_inss,
    calcular_irrf,
    calcular_irrf_plr,
)


@pytest.mark.parametrize("base", [0, -0.01, -1500.0])
def test_zero_or_negative_base_has_no_tax(base):
    assert calcular_inss(base) == 0
    assert calcular_irrf(base) == 0


def test_inss_first_bracket():
    assert calcular_inss(1000.00) == pytest.approx(75.00)
    assert calcular_inss(1412.00) == pytest.approx(105.90)


def test_inss_is_marginal_across_brackets():
    # 1412*7.5% + 1254.68*9% + 1333.35*12% + 444.41*14%
    assert calcular_inss(4444.44) == pytest.approx(441.04, abs=0.01)
    assert calcular_inss(3000.00) == pytest.approx(105.90 + 112.9212 + 333.32 * 0.12, abs=1e-6)


def test_inss_capped_at_ceiling():
    teto = calcular_inss(TABELAS_2024.INSS_teto)
    assert teto == pytest.approx(908.86, abs=0.01)
    assert calcular_inss(10000.00) == teto
    assert calcular_inss(50000.00) == teto


def test_inss_continuous_and_non_decreasing_at_bracket_bounds():
    eps = 0.01
    for limite, _, _ in TABELAS_2024.INSS_faixas:
        abaixo = calcular_inss(limite - eps)
        no_limite = calcular_inss(limite)
        acima = calcular_inss(limite + eps)
        assert abaixo <= no_limite <= acima
        # variação de um centavo nunca passa da maior alíquota
        assert acima - abaixo <= 2 * eps * 0.14 + 1e-9


def test_irrf_brackets():
    assert calcular_irrf(2259.20) == 0
    assert calcular_irrf(2500.00) == pytest.approx(18.06)
    assert calcular_irrf(3000.00) == pytest.approx(68.56)
    assert calcular_irrf(4003.40) == pytest.approx(237.995, abs=0.01)
    assert calcular_irrf(10000.00) == pytest.approx(1854.00)


@pytest.mark.parametrize("valor", [0, 100, 2259.21, 2826.65, 3751.05, 4664.68, 7640.80, 9922.28,
                                   13167.00, 16380.38, 1_000_000])
def test_irrf_functions_never_negative(valor):
    assert calcular_irrf(valor) >= 0
    assert calcular_irrf_plr(valor) >= 0


@pytest.mark.parametrize("valor", [0, 1000, 5000, 7640.80])
def test_plr_exempt_up_to_first_threshold(valor):
    assert calcular_irrf_plr(valor) == 0


def test_irrf_plr_uses_its_own_table():
    assert calcular_irrf_plr(10000.00) == pytest.approx(182.77)
    assert calcular_irrf_plr(20000.00) == pytest.approx(2376.22)
    # mesma base no IRRF mensal cairia na faixa de 27,5%
    assert calcular_irrf(10000.00) != calcular_irrf_plr(10000.00)
