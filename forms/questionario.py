from wtforms import StringField, TextAreaField
from wtforms.validators import AnyOf, Length, Optional

from .base import FormularioBase
from .campos import ListaField
from .filtros import a_inteiro, aparar, escapar, vazio_se_nulo
from .validadores import Inteiro, SubconjuntoDe

POSICOES = [
    ('goleiro', 'Goleiro'),
    ('zagueiro', 'Zagueiro'),
    ('lateral', 'Lateral'),
    ('meio', 'Meio-campo'),
    ('atacante', 'Atacante'),
]

COMPETICOES = [
    ('brasileirao', 'Brasileirão'),
    ('libertadores', 'Libertadores'),
    ('champions', 'Champions League'),
    ('copa-do-mundo', 'Copa do Mundo'),
]

TECNICOS = [
    ('tite', 'Tite'),
    ('diniz', 'Fernando Diniz'),
    ('ancelotti', 'Carlo Ancelotti'),
    ('guardiola', 'Pep Guardiola'),
    ('mourinho', 'José Mourinho'),
]


def _texto(label, minimo, message, maximo=-1):
    return StringField(label, default='', filters=[vazio_se_nulo, aparar], validators=[
        Length(min=minimo, max=maximo, message=message),
    ])


class QuestionarioForm(FormularioBase):
    nome = _texto("Nome", 3, 'Nome deve ter pelo menos 3 caracteres.')
    time_favorito = _texto("Time favorito", 2, 'Informe seu time favorito.')
    jogava = StringField("Jogava futebol?", default='', filters=[vazio_se_nulo], validators=[
        AnyOf(['sim', 'nao'], message='Selecione se você jogava futebol.'),
    ])
    posicao = StringField("Posição", validators=[
        Optional(),
        AnyOf([valor for valor, _ in POSICOES], message='Posição inválida.'),
    ])
    camisa_numero = StringField("Número da camisa", filters=[aparar], validators=[
        Optional(),
        Inteiro(min=1, max=99, message='Número da camisa deve estar entre 1 e 99.'),
    ])
    estadio_visitado = _texto("Estádio visitado", 3, 'Informe um estádio que já visitou.')
    melhor_jogador = _texto("Melhor jogador", 3, 'Informe o melhor jogador para você.')
    comp_torce = StringField("Competição", default='', filters=[vazio_se_nulo], validators=[
        AnyOf([valor for valor, _ in COMPETICOES], message='Competição inválida.'),
    ])
    tecnicos_gostados = ListaField("Técnicos", validators=[
        SubconjuntoDe([valor for valor, _ in TECNICOS], message='Técnico inválido.'),
    ])
    comentario = TextAreaField("Comentário", default='', filters=[vazio_se_nulo, aparar], validators=[
        Length(min=10, max=300, message='Comentário deve ter entre 10 e 300 caracteres.'),
    ])

    sanitizadores = {
        'nome': [escapar],
        'time_favorito': [escapar],
        'camisa_numero': [a_inteiro],
        'estadio_visitado': [escapar],
        'melhor_jogador': [escapar],
        'comentario': [escapar],
    }
