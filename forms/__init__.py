from .contato import ContatoForm, GENEROS, INTERESSES
from .questionario import QuestionarioForm, COMPETICOES, POSICOES, TECNICOS
