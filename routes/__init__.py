from .contato import contato_bp
from .questionario import questionario_bp
