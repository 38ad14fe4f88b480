import pytest
from flask import template_rendered

from app import create_app
from models import db, Contato


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def templates(app):
    """Records (template name, context) for every template rendered."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template.name, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)


@pytest.fixture()
def contato_valido():
    return {
        "nome": "Ana Silva",
        "email": "ana@x.com",
        "mensagem": "Olá, mundo!!",
        "aceite": "on",
    }


@pytest.fixture()
def criar_contato(app):
    def criar(**campos):
        valores = {
            "nome": "Ana Silva",
            "email": "ana@x.com",
            "mensagem": "Mensagem de teste",
            "aceite": 1,
            "interesses": "",
        }
        valores.update(campos)
        contato = Contato(**valores)
        db.session.add(contato)
        db.session.commit()
        return contato

    return criar
