from dataclasses import dataclass, asdict, field
from typing import Dict, Optional, Tuple, Union
import logging
import math
import re
from decimal import Decimal, InvalidOperation

from ferias_plr.impostos import (
    TABELAS_2024,
    TabelasImpostos2024,
    calcular_inss,
    calcular_irrf,
    calcular_irrf_plr,
)

logger = logging.getLogger(__name__)

Numero = Union[int, float, str]


# =========================
# Regras CLT (2024)
# =========================

@dataclass(frozen=True)
class RegrasCLT2024:
    salario_minimo: float = 1412.00   # piso nacional 2024
    dias_periodo: int = 30            # período aquisitivo completo
    dias_ferias_min: int = 1
    dias_venda_max: int = 10          # abono: até 1/3 do período
    dias_min_com_venda: int = 15      # quem vende precisa gozar ao menos 15 dias
    divisor_dia: int = 30             # salário / 30 = valor do dia
    terco_constitucional: float = 1 / 3
    pct_adiantamento_13: float = 0.50


REGRAS_2024 = RegrasCLT2024()


# =========================
# Modelos de entrada / saída
# =========================

@dataclass(frozen=True)
class EntradaFerias:
    """Valores como digitados: números ou textos numéricos ('R$ 5.000,00')."""
    salario_bruto: Numero
    dias_ferias: Numero
    dias_vendidos: Numero = 0
    adiantamento_13: bool = False
    incluir_plr: bool = False
    plr_percentual: Numero = 0.0


@dataclass(frozen=True)
class Beneficios:
    dias_gozados: int
    dias_vendidos: int
    valor_dia: float
    valor_ferias: float
    adicional_ferias: float
    subtotal_ferias_gozadas: float   # tributável
    valor_abono: float
    adicional_abono: float
    subtotal_abono: float            # isento
    adiantamento_13: float           # isento na 1ª parcela
    valor_plr: float


@dataclass(frozen=True)
class ResultadoFerias(Beneficios):
    inss: float
    irrf: float
    irrf_plr: float
    plr_liquido: float
    subtotal_ferias: float
    total_bruto: float
    total_descontos: float
    total_liquido: float


@dataclass(frozen=True)
class ResultadoCalculo:
    erros: Dict[str, str] = field(default_factory=dict)
    resultado: Optional[ResultadoFerias] = None

    @property
    def ok(self) -> bool:
        return not self.erros


# =========================
# Utilidades BRL
# =========================

def parse_brl(txt: str) -> float:
    if txt is None:
        raise ValueError("valor vazio")
    raw = str(txt).strip().replace("R$", "").strip()
    raw = re.sub(r"\s+", "", raw)
    if "," in raw and "." in raw.rsplit(",", 1)[1]:
        # formato americano '5,000.00' não é aceito
        raise ValueError(f"não consegui interpretar '{txt}' como número em BRL")
    if "," in raw:
        # formato brasileiro: ponto é milhar, vírgula é decimal
        canonical = raw.replace(".", "").replace(",", ".")
    elif re.fullmatch(r"-?\d{1,3}(\.\d{3})+", raw):
        # só separador de milhar: '5.000'
        canonical = raw.replace(".", "")
    else:
        canonical = raw
    try:
        valor = float(Decimal(canonical))
    except (InvalidOperation, ValueError):
        raise ValueError(f"não consegui interpretar '{txt}' como número em BRL")
    if not math.isfinite(valor):
        raise ValueError(f"não consegui interpretar '{txt}' como número em BRL")
    return valor

def format_brl(valor: float) -> str:
    if isinstance(valor, bool) or not isinstance(valor, (int, float)) or math.isnan(valor):
        return "R$ 0,00"
    sinal = "-" if valor < 0 else ""
    inteiro, centavos = divmod(int(round(abs(valor) * 100)), 100)
    s_int = f"{inteiro:,}".replace(",", ".")
    s_cent = f"{centavos:02d}"
    return f"{sinal}R$ {s_int},{s_cent}"


def _numero(valor: Numero) -> float:
    if isinstance(valor, bool):
        raise ValueError("valor booleano não é numérico")
    if isinstance(valor, (int, float)):
        try:
            numero = float(valor)
        except OverflowError:
            raise ValueError("valor grande demais")
        if not math.isfinite(numero):
            raise ValueError(f"valor não finito: {valor}")
        return numero
    return parse_brl(valor)

def _inteiro(valor: Numero) -> int:
    numero = _numero(valor)
    if not numero.is_integer():
        raise ValueError(f"'{valor}' não é um número inteiro de dias")
    return int(numero)


# =========================
# Validação
# =========================

def _ler_campos(entrada: EntradaFerias) -> Tuple[Dict[str, Optional[float]], Dict[str, str]]:
    """Converte os campos brutos; falhas de conversão viram erros do campo."""
    valores: Dict[str, Optional[float]] = {}
    erros: Dict[str, str] = {}

    try:
        valores["salario_bruto"] = _numero(entrada.salario_bruto)
    except ValueError:
        valores["salario_bruto"] = None
        erros["salario_bruto"] = "Não consegui entender o salário. Use algo como 'R$ 5.000,00'."

    for campo in ("dias_ferias", "dias_vendidos"):
        try:
            valores[campo] = _inteiro(getattr(entrada, campo))
        except ValueError:
            valores[campo] = None
            erros[campo] = "Informe um número inteiro de dias."

    valores["plr_percentual"] = 0.0
    if entrada.incluir_plr:
        try:
            valores["plr_percentual"] = _numero(entrada.plr_percentual)
        except ValueError:
            valores["plr_percentual"] = None
            erros["plr_percentual"] = "Informe a porcentagem da PLR como número."

    return valores, erros


def _registrar(erros: Dict[str, str], campo: str, mensagem: str) -> None:
    if campo in erros:
        erros[campo] = f"{erros[campo]} • {mensagem}"
    else:
        erros[campo] = mensagem


def validar_entrada(entrada: EntradaFerias, regras: RegrasCLT2024 = REGRAS_2024) -> Dict[str, str]:
    """
    Confere todas as regras de uma vez (não para no primeiro erro).
    Retorna {campo: mensagem}; vazio quando a entrada é válida.
    """
    v, erros = _ler_campos(entrada)
    salario, ferias, vendidos, plr = (
        v["salario_bruto"], v["dias_ferias"], v["dias_vendidos"], v["plr_percentual"]
    )

    if salario is not None and salario < regras.salario_minimo:
        _registrar(erros, "salario_bruto",
                   f"Salário deve ser de no mínimo {format_brl(regras.salario_minimo)}.")

    if ferias is not None and not (regras.dias_ferias_min <= ferias <= regras.dias_periodo):
        _registrar(erros, "dias_ferias",
                   f"Dias a gozar devem ser entre {regras.dias_ferias_min} e {regras.dias_periodo}.")

    if vendidos is not None and not (0 <= vendidos <= regras.dias_venda_max):
        _registrar(erros, "dias_vendidos",
                   f"A venda é limitada a {regras.dias_venda_max} dias.")

    # regras cruzadas só quando os dois campos foram entendidos
    if ferias is not None and vendidos is not None:
        if ferias + vendidos > regras.dias_periodo:
            _registrar(erros, "dias_ferias",
                       f"A soma de dias a gozar e dias vendidos não pode exceder {regras.dias_periodo}.")
        if vendidos > 0 and ferias < regras.dias_min_com_venda:
            _registrar(erros, "dias_ferias",
                       f"Ao vender férias, você deve gozar de no mínimo {regras.dias_min_com_venda} dias.")

    if entrada.incluir_plr and plr is not None and plr < 0:
        _registrar(erros, "plr_percentual", "A porcentagem da PLR não pode ser negativa.")

    return erros


# =========================
# Núcleo do cálculo
# =========================

def calcular_beneficios(entrada: EntradaFerias, regras: RegrasCLT2024 = REGRAS_2024) -> Beneficios:
    """Verbas brutas a partir de uma entrada já validada (sem arredondar)."""
    v, erros = _ler_campos(entrada)
    if erros:
        raise ValueError(f"entrada inválida: {erros}")

    salario = v["salario_bruto"]
    ferias = int(v["dias_ferias"])
    vendidos = int(v["dias_vendidos"])

    valor_dia = salario / regras.divisor_dia

    # Férias gozadas + 1/3 constitucional (tributável)
    valor_ferias = valor_dia * ferias
    adicional_ferias = valor_ferias * regras.terco_constitucional

    # Abono pecuniário + 1/3 (isento)
    valor_abono = adicional_abono = 0.0
    if vendidos > 0:
        valor_abono = valor_dia * vendidos
        adicional_abono = valor_abono * regras.terco_constitucional

    adiantamento = salario * regras.pct_adiantamento_13 if entrada.adiantamento_13 else 0.0
    valor_plr = salario * (v["plr_percentual"] / 100) if entrada.incluir_plr else 0.0

    return Beneficios(
        dias_gozados=ferias,
        dias_vendidos=vendidos,
        valor_dia=valor_dia,
        valor_ferias=valor_ferias,
        adicional_ferias=adicional_ferias,
        subtotal_ferias_gozadas=valor_ferias + adicional_ferias,
        valor_abono=valor_abono,
        adicional_abono=adicional_abono,
        subtotal_abono=valor_abono + adicional_abono,
        adiantamento_13=adiantamento,
        valor_plr=valor_plr,
    )


def aplicar_impostos(b: Beneficios, tabelas: TabelasImpostos2024 = TABELAS_2024) -> ResultadoFerias:
    # INSS primeiro; o IRRF incide sobre a base já sem o INSS
    inss = calcular_inss(b.subtotal_ferias_gozadas, tabelas)
    irrf = calcular_irrf(b.subtotal_ferias_gozadas - inss, tabelas)

    # PLR: sem INSS, tabela exclusiva e separada do salário
    irrf_plr = calcular_irrf_plr(b.valor_plr, tabelas)

    subtotal_ferias = b.subtotal_ferias_gozadas + b.subtotal_abono
    total_bruto = subtotal_ferias + b.adiantamento_13 + b.valor_plr
    total_descontos = inss + irrf + irrf_plr

    return ResultadoFerias(
        **asdict(b),
        inss=inss,
        irrf=irrf,
        irrf_plr=irrf_plr,
        plr_liquido=b.valor_plr - irrf_plr,
        subtotal_ferias=subtotal_ferias,
        total_bruto=total_bruto,
        total_descontos=total_descontos,
        total_liquido=total_bruto - total_descontos,
    )


def calcular(
    entrada: EntradaFerias,
    regras: RegrasCLT2024 = REGRAS_2024,
    tabelas: TabelasImpostos2024 = TABELAS_2024,
) -> ResultadoCalculo:
    """
    Ponto de entrada: valida, calcula as verbas e aplica INSS/IRRF.
    Devolve os erros de validação OU o resultado completo, nunca os dois.
    """
    erros = validar_entrada(entrada, regras)
    if erros:
        logger.info("Entrada rejeitada com %d erro(s): %s", len(erros), ", ".join(sorted(erros)))
        return ResultadoCalculo(erros=erros)

    resultado = aplicar_impostos(calcular_beneficios(entrada, regras), tabelas)
    logger.debug(
        "Cálculo concluído: bruto=%.2f descontos=%.2f líquido=%.2f",
        resultado.total_bruto, resultado.total_descontos, resultado.total_liquido,
    )
    return ResultadoCalculo(resultado=resultado)
