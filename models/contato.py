from markupsafe import Markup

from . import db

INTERESSES_SEPARADOR = ','


class Contato(db.Model):
    __tablename__ = 'contatos'
    id = db.Column(db.Integer, primary_key=True)
    nome = db.Column(db.Text, nullable=False)
    email = db.Column(db.String(254), nullable=False)
    idade = db.Column(db.Integer)
    genero = db.Column(db.String(30))
    interesses = db.Column(db.Text, nullable=False, default='')
    mensagem = db.Column(db.Text, nullable=False)
    aceite = db.Column(db.Integer, nullable=False, default=0)
    criado_em = db.Column(db.DateTime, nullable=False, server_default=db.func.current_timestamp())

    @staticmethod
    def colunas(dados):
        """Map a validated form echo onto column values."""
        interesses = dados.get('interesses') or []
        if not isinstance(interesses, str):
            interesses = INTERESSES_SEPARADOR.join(interesses)
        return {
            'nome': str(dados['nome']),
            'email': dados['email'],
            'idade': dados.get('idade') or None,
            'genero': dados.get('genero') or None,
            'interesses': interesses,
            'mensagem': str(dados['mensagem']),
            'aceite': 1 if dados.get('aceite') else 0,
        }

    @property
    def lista_interesses(self):
        return self.interesses.split(INTERESSES_SEPARADOR) if self.interesses else []

    def para_formulario(self):
        # nome and mensagem were escaped before being stored
        return {
            'id': self.id,
            'nome': Markup(self.nome),
            'email': self.email,
            'idade': self.idade,
            'genero': self.genero or '',
            'interesses': self.lista_interesses,
            'mensagem': Markup(self.mensagem),
            'aceite': self.aceite == 1,
        }
