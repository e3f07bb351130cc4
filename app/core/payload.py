"""
Lectura y validación estructural de cuerpos JSON crudos.

Los endpoints de creación inspeccionan el JSON antes de construir el schema
tipado, para poder reportar el primer campo faltante o el primer campo con
tipo incorrecto con el mensaje exacto de cada entidad.

Los números decodificados conservan el texto con el que llegaron
(`number_literal`), de modo que un `1e3` se reporta como `1e3` y no como
`1000.0`.
"""

import json
import re
from datetime import date
from typing import Any, Dict, Iterable, Optional, Tuple

from fastapi import Request

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Rango de los enteros de 64 bits y máximo de un float32
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1
FLOAT32_MAX = 3.4028234663852886e+38

# Tipos de destino soportados y su nombre en los mensajes de error
TYPE_NAMES = {int: "int", float: "float32", str: "string"}


class JSONSyntaxError(ValueError):
    """El cuerpo no es JSON válido; offset es la posición del error en bytes"""

    def __init__(self, offset: int, reason: str = "invalid JSON"):
        super().__init__(f"{reason} (offset {offset})")
        self.offset = offset


class JSONInt(int):
    """Entero decodificado que guarda su texto original"""

    def __new__(cls, literal: str):
        number = super().__new__(cls, literal)
        number.literal = literal
        return number


class JSONFloat(float):
    """Número con fracción o exponente que guarda su texto original"""

    def __new__(cls, literal: str):
        number = super().__new__(cls, literal)
        number.literal = literal
        return number


def parse_int(text: Optional[str]) -> Optional[int]:
    """Convertir un parámetro de ruta o query a entero de 64 bits; None si no es válido"""
    if text is None or not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def loads(raw: bytes) -> Any:
    try:
        return json.loads(raw, parse_int=JSONInt, parse_float=JSONFloat)
    except json.JSONDecodeError as e:
        # Offset en bytes consumidos, incluido el que provocó el error
        consumed = len(e.doc[:e.pos].encode("utf-8"))
        offset = consumed + 1 if e.pos < len(e.doc) else consumed
        raise JSONSyntaxError(offset, e.msg) from e
    except UnicodeDecodeError as e:
        raise JSONSyntaxError(e.start, "invalid encoding") from e


async def read_json(request: Request) -> Any:
    """Leer el cuerpo completo de la petición y decodificarlo"""
    return loads(await request.body())


def number_literal(value: Any) -> str:
    """Texto del número tal como llegó en el JSON"""
    return getattr(value, "literal", str(value))


def json_kind(value: Any) -> str:
    """Nombre del tipo JSON de un valor ya decodificado"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def first_missing(body: Dict[str, Any], fields: Iterable[str]) -> Optional[str]:
    for field in fields:
        if field not in body:
            return field
    return None


def fits_type(value: Any, target: type) -> bool:
    """El valor se puede decodificar en el tipo destino (null siempre encaja)"""
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if target is int:
        return isinstance(value, int) and INT64_MIN <= value <= INT64_MAX
    if target is float:
        return isinstance(value, (int, float)) and abs(value) <= FLOAT32_MAX
    return isinstance(value, target)


def first_type_mismatch(
    body: Dict[str, Any],
    types: Dict[str, type]
) -> Optional[Tuple[str, str, str]]:
    """
    Recorrer el cuerpo en orden de documento y devolver
    (campo, valor_provisto, tipo_esperado) del primer valor que no encaja.

    Un número en un campo de texto se reporta como "number"; en un campo
    numérico se reporta con su texto, ej. "number 1e3".
    """
    for field, value in body.items():
        target = types.get(field)
        if target is None or fits_type(value, target):
            continue
        provided = json_kind(value)
        if provided == "number" and target is not str:
            provided = f"number {number_literal(value)}"
        return field, provided, TYPE_NAMES[target]
    return None


def strip_nulls(body: Dict[str, Any]) -> Dict[str, Any]:
    """null deja el valor previo (o el cero del tipo)"""
    return {key: value for key, value in body.items() if value is not None}


_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_date(text: Any) -> bool:
    """Fecha con formato YYYY-MM-DD y valores de calendario válidos"""
    if not isinstance(text, str) or not _DATE_PATTERN.fullmatch(text):
        return False
    try:
        date.fromisoformat(text)
    except ValueError:
        return False
    return True


def is_positive_integer(value: Any) -> bool:
    """Número JSON entero, mayor que cero y dentro de 64 bits (1.0 se acepta, 1.5 no)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return 0 < value <= INT64_MAX and value == int(value)
