"""Filters run before validation and sanitizers applied to fields that passed it."""
from markupsafe import escape

# domain -> (canonical domain, strip dots from local part, subaddress separator)
_PROVEDORES = {
    'gmail.com': ('gmail.com', True, '+'),
    'googlemail.com': ('gmail.com', True, '+'),
    'outlook.com': ('outlook.com', False, '+'),
    'hotmail.com': ('hotmail.com', False, '+'),
    'live.com': ('live.com', False, '+'),
    'icloud.com': ('icloud.com', False, '+'),
    'me.com': ('me.com', False, '+'),
    'mac.com': ('mac.com', False, '+'),
    'yahoo.com': ('yahoo.com', False, '-'),
    'ymail.com': ('ymail.com', False, '-'),
    'rocketmail.com': ('rocketmail.com', False, '-'),
}


def aparar(valor):
    if isinstance(valor, str):
        return valor.strip()
    return valor


def vazio_se_nulo(valor):
    return '' if valor is None else valor


def escapar(valor):
    if valor is None:
        return valor
    return escape(valor)


def a_inteiro(valor):
    if valor is None or valor == '':
        return None
    return int(valor)


def normalizar_email(valor):
    """Lowercase the address and fold provider-specific aliases.

    ``Fulano.Silva+news@GoogleMail.com`` becomes ``fulanosilva@gmail.com``.
    """
    if not valor or '@' not in valor:
        return valor
    local, _, dominio = valor.lower().rpartition('@')
    provedor = _PROVEDORES.get(dominio)
    if provedor is None:
        return f'{local}@{dominio}'
    dominio, sem_pontos, separador = provedor
    local = local.split(separador, 1)[0]
    if sem_pontos:
        local = local.replace('.', '')
    return f'{local}@{dominio}'
