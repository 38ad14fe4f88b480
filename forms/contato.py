from wtforms import StringField, TextAreaField
from wtforms.validators import AnyOf, Email, Length, Optional, Regexp

from .base import FormularioBase
from .campos import ListaField
from .filtros import a_inteiro, aparar, escapar, normalizar_email, vazio_se_nulo
from .validadores import Inteiro, SubconjuntoDe

GENEROS = [
    ('', 'Prefiro não selecionar'),
    ('feminino', 'Feminino'),
    ('masculino', 'Masculino'),
    ('nao-binario', 'Não-binário'),
    ('prefiro-nao-informar', 'Prefiro não informar'),
]

INTERESSES = [
    ('node', 'Node.js'),
    ('express', 'Express'),
    ('ejs', 'EJS'),
    ('frontend', 'Front-end'),
    ('backend', 'Back-end'),
]

NOME_RE = r"^[A-Za-zÀ-ÖØ-öø-ÿ' -]+$"


class ContatoForm(FormularioBase):
    nome = StringField("Nome", default='', filters=[vazio_se_nulo, aparar], validators=[
        Length(min=3, max=60, message='Nome deve ter entre 3 e 60 caracteres.'),
        Regexp(NOME_RE, message='Nome contém caracteres inválidos.'),
    ])
    email = StringField("E-mail", default='', filters=[vazio_se_nulo, aparar], validators=[
        Email(message='E-mail inválido.'),
    ])
    idade = StringField("Idade", filters=[aparar], validators=[
        Optional(),
        Inteiro(min=1, max=120, message='Idade deve ser um inteiro entre 1 e 120.'),
    ])
    genero = StringField("Gênero", default='', filters=[vazio_se_nulo], validators=[
        AnyOf([valor for valor, _ in GENEROS], message='Gênero inválido.'),
    ])
    interesses = ListaField("Interesses", validators=[
        SubconjuntoDe([valor for valor, _ in INTERESSES], message='Interesse inválido.'),
    ])
    mensagem = TextAreaField("Mensagem", default='', filters=[vazio_se_nulo, aparar], validators=[
        Length(min=10, max=500, message='Mensagem deve ter entre 10 e 500 caracteres.'),
    ])
    aceite = StringField("Aceite", default='', filters=[vazio_se_nulo], validators=[
        AnyOf(['on'], message='Você deve aceitar os termos para continuar.'),
    ])

    sanitizadores = {
        'nome': [escapar],
        'email': [normalizar_email],
        'idade': [a_inteiro],
        'mensagem': [escapar],
    }

    def dados(self):
        dados = super().dados()
        if not dados['idade']:
            dados['idade'] = None
        dados['aceite'] = self.aceite.data == 'on'
        return dados
