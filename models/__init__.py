from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .contato import Contato
