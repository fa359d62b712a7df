import sys

from ferias_plr.calc import EntradaFerias, ResultadoFerias, calcular, format_brl
from ferias_plr.settings import (
    DIAS_FERIAS_PADRAO,
    DIAS_VENDIDOS_PADRAO,
    PLR_PERCENTUAL_PADRAO,
    SALARIO_PADRAO,
    configurar_logging,
)

ROTULOS = {
    "salario_bruto": "Salário bruto",
    "dias_ferias": "Dias de férias",
    "dias_vendidos": "Dias vendidos",
    "plr_percentual": "PLR (%)",
}


def _perguntar(texto: str, padrao) -> str:
    resposta = input(f"{texto} [padrão {padrao}]: ").strip()
    return resposta or str(padrao)

def _sim_nao(texto: str, padrao: bool = True) -> bool:
    resposta = input(f"{texto} (s/n) [padrão {'s' if padrao else 'n'}]: ").strip().lower()
    if not resposta:
        return padrao
    return resposta in ("s", "sim", "y", "yes")


def imprimir_resultado(r: ResultadoFerias) -> None:
    print("\n--- Férias gozadas ---")
    print(f"Dias gozados:               {r.dias_gozados} dias")
    print("Valor das férias:          ", format_brl(r.valor_ferias))
    print("1/3 constitucional:        ", format_brl(r.adicional_ferias))
    print("Subtotal (tributável):     ", format_brl(r.subtotal_ferias_gozadas))

    if r.dias_vendidos > 0:
        print("\n--- Abono pecuniário (venda) ---")
        print(f"Dias vendidos:              {r.dias_vendidos} dias")
        print("Valor do abono:            ", format_brl(r.valor_abono))
        print("1/3 sobre abono:           ", format_brl(r.adicional_abono))
        print("Subtotal (isento):         ", format_brl(r.subtotal_abono))

    if r.adiantamento_13 > 0:
        print("\n--- Adiantamento 13º ---")
        print("1ª parcela (50%, isento):  ", format_brl(r.adiantamento_13))

    if r.valor_plr > 0:
        print("\n--- PLR ---")
        print("Valor bruto:               ", format_brl(r.valor_plr))
        print("IRRF sobre PLR:           -", format_brl(r.irrf_plr))
        print("Líquido da PLR:            ", format_brl(r.plr_liquido))

    print("\n--- Totais ---")
    print("Total bruto:               ", format_brl(r.total_bruto))
    print("(-) INSS férias:           ", format_brl(r.inss))
    print("(-) IRRF férias:           ", format_brl(r.irrf))
    if r.irrf_plr > 0:
        print("(-) IRRF PLR:              ", format_brl(r.irrf_plr))
    print("Valor líquido final:       ", format_brl(r.total_liquido))


def main() -> int:
    configurar_logging()
    print("=== Calculadora de Férias, 13º e PLR (CLT 2024) ===")
    try:
        salario = _perguntar("Salário bruto mensal (ex.: R$ 5.000,00)", SALARIO_PADRAO)
        dias = _perguntar("Dias de férias a gozar (1-30)", DIAS_FERIAS_PADRAO)
        vendidos = _perguntar("Dias para vender - abono (0-10)", DIAS_VENDIDOS_PADRAO)
        adiantar = _sim_nao("Adiantar 1ª parcela do 13º?")
        incluir_plr = _sim_nao("Adicionar PLR no cálculo?")
        plr_pct = _perguntar("PLR (% do salário)", PLR_PERCENTUAL_PADRAO) if incluir_plr else 0
    except (EOFError, KeyboardInterrupt):
        print("\nCancelado.")
        return 130

    saida = calcular(EntradaFerias(
        salario_bruto=salario,
        dias_ferias=dias,
        dias_vendidos=vendidos,
        adiantamento_13=adiantar,
        incluir_plr=incluir_plr,
        plr_percentual=plr_pct,
    ))

    if not saida.ok:
        print("\nCorrija os dados informados:")
        for campo, mensagem in saida.erros.items():
            print(f"  • {ROTULOS.get(campo, campo)}: {mensagem}")
        return 1

    imprimir_resultado(saida.resultado)
    return 0


if __name__ == "__main__":
    sys.exit(main())
