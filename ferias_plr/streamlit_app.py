# streamlit_app.py
import streamlit as st

from ferias_plr.calc import EntradaFerias, calcular, format_brl
from ferias_plr.settings import (
    DIAS_FERIAS_PADRAO,
    DIAS_VENDIDOS_PADRAO,
    PLR_PERCENTUAL_PADRAO,
    SALARIO_PADRAO,
    configurar_logging,
)

configurar_logging()


# -------- Helpers --------
def md_safe(text: str) -> str:
    return (text.replace("\\", "\\\\")
                .replace("$", "\\$")
                .replace("*", "\\*")
                .replace("_", "\\_"))

def card(titulo: str, linhas, rodape_rotulo: str, rodape_valor: float):
    with st.container(border=True):
        st.markdown(f"#### {titulo}")
        for rotulo, valor in linhas:
            st.markdown(f"- {rotulo}: **{md_safe(valor)}**")
        st.markdown(f"**{rodape_rotulo}:** {md_safe(format_brl(rodape_valor))}")

def erro_do_campo(erros, campo: str):
    if campo in erros:
        st.error(erros[campo])


# -------- UI --------
st.set_page_config(page_title="Calculadora de Férias e PLR", page_icon="🧮", layout="centered")
st.markdown(
    "<h1 style='text-align:center;margin:0;'>Calculadora de Férias e PLR</h1>",
    unsafe_allow_html=True
)
st.caption("Simule o cálculo de suas férias, incluindo abono, 13º e PLR, conforme a CLT (tabelas 2024).")

# -------- Formulário --------
with st.form("form-ferias", clear_on_submit=False):
    c1, c2 = st.columns([2, 1.2])

    with c1:
        salario_str = st.text_input("Salário Bruto Mensal", value=format_brl(SALARIO_PADRAO),
                                    placeholder="Ex.: R$ 5.000,00")
        dias_ferias = st.number_input("Dias de Férias a Gozar (1–30)", step=1,
                                      value=DIAS_FERIAS_PADRAO, format="%d")
        dias_vendidos = st.number_input("Dias para Vender - Abono (0–10)", step=1,
                                        value=DIAS_VENDIDOS_PADRAO, format="%d",
                                        help="Máximo 1/3 do período (até 10 dias).")

    with c2:
        adiantamento_13 = st.checkbox("Adiantar 1ª Parcela do 13º?", value=True)
        incluir_plr = st.checkbox("Adicionar PLR no cálculo?", value=True)
        plr_pct = st.number_input("PLR (% do Salário)", step=10.0, value=PLR_PERCENTUAL_PADRAO,
                                  help="A Participação nos Lucros e Resultados (PLR) é um bônus pago pela empresa.")

    submit = st.form_submit_button("Calcular Valores", use_container_width=True)

st.markdown("---")

# resultados só existem após um envio válido; mudar os campos e reenviar recalcula tudo
if submit:
    saida = calcular(EntradaFerias(
        salario_bruto=salario_str,
        dias_ferias=int(dias_ferias),
        dias_vendidos=int(dias_vendidos),
        adiantamento_13=adiantamento_13,
        incluir_plr=incluir_plr,
        plr_percentual=plr_pct,
    ))

    if not saida.ok:
        st.subheader("Corrija os dados informados")
        erro_do_campo(saida.erros, "salario_bruto")
        erro_do_campo(saida.erros, "dias_ferias")
        erro_do_campo(saida.erros, "dias_vendidos")
        erro_do_campo(saida.erros, "plr_percentual")
    else:
        r = saida.resultado
        st.subheader("Resultado do Cálculo")

        d1, d2 = st.columns(2)
        with d1:
            card("Férias Gozadas", [
                ("Dias gozados", f"{r.dias_gozados} dias"),
                ("Valor das Férias", format_brl(r.valor_ferias)),
                ("1/3 Constitucional", format_brl(r.adicional_ferias)),
            ], "Subtotal (Tributável)", r.subtotal_ferias_gozadas)

            if r.adiantamento_13 > 0:
                card("Adiantamento 13º Salário", [],
                     "1ª Parcela (50%, Isento)", r.adiantamento_13)

        with d2:
            if r.dias_vendidos > 0:
                card("Abono Pecuniário (Venda)", [
                    ("Dias vendidos", f"{r.dias_vendidos} dias"),
                    ("Valor do Abono", format_brl(r.valor_abono)),
                    ("1/3 sobre Abono", format_brl(r.adicional_abono)),
                ], "Subtotal (Isento)", r.subtotal_abono)

            if r.valor_plr > 0:
                card("PLR (Participação nos Lucros)", [
                    ("Valor Bruto", format_brl(r.valor_plr)),
                    ("IRRF sobre PLR", "-" + format_brl(r.irrf_plr)),
                ], "Líquido da PLR", r.plr_liquido)

        st.metric("TOTAL BRUTO A RECEBER", format_brl(r.total_bruto))
        st.caption("(Soma de todos os proventos brutos)")

        st.metric("VALOR LÍQUIDO FINAL", format_brl(r.total_liquido))
        t1, t2, t3 = st.columns(3)
        t1.metric("INSS Férias", "(-) " + format_brl(r.inss))
        t2.metric("IRRF Férias", "(-) " + format_brl(r.irrf))
        if r.irrf_plr > 0:
            t3.metric("IRRF PLR", "(-) " + format_brl(r.irrf_plr))

st.markdown("---")
st.markdown("### Informações Importantes (CLT)")
st.markdown(
    "- **Prazo de Pagamento:** O pagamento das férias, incluindo o terço constitucional, "
    "deve ser feito até 2 dias antes do início do período de descanso.\n"
    "- **Descontos (INSS/IRRF):** O valor das férias (férias gozadas + 1/3) sofre descontos "
    "de INSS e IRRF. O abono pecuniário é isento de ambos.\n"
    "- **PLR (Lucros e Resultados):** A PLR não tem desconto de INSS e possui uma tabela de "
    "Imposto de Renda (IRRF) exclusiva, calculada em separado do salário.\n"
    "- **13º Salário:** A 2ª parcela, paga até 20 de dezembro, terá os descontos de INSS e "
    "IRRF sobre o valor integral do 13º."
)
