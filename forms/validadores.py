import re

from wtforms.validators import ValidationError

_INTEIRO_RE = re.compile(r'^[-+]?[0-9]+$')


class Inteiro:
    """ASCII whole number, optionally bounded. Leading sign and zeros are accepted."""

    def __init__(self, min=None, max=None, message=None):
        self.min = min
        self.max = max
        self.message = message or 'Informe um número inteiro.'

    def __call__(self, form, field):
        valor = field.data
        if not isinstance(valor, str) or not _INTEIRO_RE.match(valor):
            raise ValidationError(self.message)
        numero = int(valor)
        if self.min is not None and numero < self.min:
            raise ValidationError(self.message)
        if self.max is not None and numero > self.max:
            raise ValidationError(self.message)


class SubconjuntoDe:
    """Every element of a list field must belong to a closed vocabulary."""

    def __init__(self, valores, message=None):
        self.valores = frozenset(valores)
        self.message = message or 'Valor inválido.'

    def __call__(self, form, field):
        if not all(valor in self.valores for valor in field.data or []):
            raise ValidationError(self.message)
