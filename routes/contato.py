from flask import Blueprint, current_app, redirect, render_template, url_for
from sqlalchemy import desc

from forms import GENEROS, INTERESSES, ContatoForm
from models import db, Contato

contato_bp = Blueprint('contato', __name__)


# largest integer SQLite binds; anything above matches no row
_MAIOR_ID = 2 ** 63 - 1


def _parse_id(valor):
    try:
        id = int(valor)
    except (TypeError, ValueError):
        return None
    if not 1 <= id <= _MAIOR_ID:
        return None
    return id


def _render_formulario(template, title, data, errors, status=200):
    return render_template(
        template,
        title=title,
        data=data,
        errors=errors,
        generos=GENEROS,
        interesses=INTERESSES,
    ), status


#######################################################
# Route for displaying the contact form
#######################################################
@contato_bp.route('/', methods=['GET'])
def formulario():
    return _render_formulario('contato.html', 'Formulário de Contato', {}, {})


#######################################################
# Route for creating a contact
#######################################################
@contato_bp.route('/', methods=['POST'])
def criar():
    validated, form = ContatoForm().custom_validate()
    data = form.dados()

    if not validated:
        current_app.logger.warning(f"Contact rejected: {sorted(form.erros)}")
        return _render_formulario('contato.html', 'Formulário de Contato', data, form.erros, 400)

    contato = Contato(**Contato.colunas(data))
    db.session.add(contato)
    db.session.commit()
    current_app.logger.info(f"Contact {contato.id} created")

    return render_template('sucesso.html', title='Enviado com sucesso', data=data)


######################################################
# Route for listing contacts
######################################################
@contato_bp.route('/lista')
def lista():
    contatos = Contato.query.order_by(desc(Contato.criado_em), desc(Contato.id)).all()
    return render_template('contato-lista.html', title='Lista de Contatos', contatos=contatos)


#######################################################
# Route for deleting contacts
#######################################################
@contato_bp.route('/<contato_id>/delete', methods=['POST'])
def excluir(contato_id):
    id = _parse_id(contato_id)
    if id is None:
        return redirect(url_for('contato.lista'))

    apagados = Contato.query.filter_by(id=id).delete()
    db.session.commit()
    current_app.logger.info(f"Delete contact {id}: {apagados} row(s) removed")

    return redirect(url_for('contato.lista'))


#######################################################
# Route for the edit form
#######################################################
@contato_bp.route('/<contato_id>/edit', methods=['GET'])
def editar(contato_id):
    id = _parse_id(contato_id)
    if id is None:
        return redirect(url_for('contato.lista'))

    contato = Contato.query.filter_by(id=id).first()
    if contato is None:
        return redirect(url_for('contato.lista'))

    return _render_formulario('contato-edit.html', 'Editar Contato', contato.para_formulario(), {})


#######################################################
# Route for saving an edited contact
#######################################################
@contato_bp.route('/<contato_id>/edit', methods=['POST'])
def atualizar(contato_id):
    id = _parse_id(contato_id)
    if id is None:
        return redirect(url_for('contato.lista'))

    validated, form = ContatoForm().custom_validate()
    data = form.dados()

    if not validated:
        current_app.logger.warning(f"Update of contact {id} rejected: {sorted(form.erros)}")
        return _render_formulario('contato-edit.html', 'Editar Contato', {**data, 'id': id}, form.erros, 400)

    atualizados = Contato.query.filter_by(id=id).update(Contato.colunas(data))
    db.session.commit()
    current_app.logger.info(f"Update contact {id}: {atualizados} row(s) changed")

    return redirect(url_for('contato.lista'))
