from flask import Blueprint, current_app, render_template

from forms import COMPETICOES, POSICOES, TECNICOS, QuestionarioForm

questionario_bp = Blueprint('questionario', __name__)


def _render_questionario(data, errors, status=200):
    return render_template(
        'questionario.html',
        title='Questionário sobre Futebol',
        data=data,
        errors=errors,
        posicoes=POSICOES,
        competicoes=COMPETICOES,
        tecnicos=TECNICOS,
    ), status


@questionario_bp.route('/', methods=['GET'])
def formulario():
    return _render_questionario({}, {})


@questionario_bp.route('/', methods=['POST'])
def enviar():
    """Validate and echo the answers; nothing is stored."""
    validated, form = QuestionarioForm().custom_validate()
    data = form.dados()

    if not validated:
        current_app.logger.warning(f"Survey rejected: {sorted(form.erros)}")
        return _render_questionario(data, form.erros, 400)

    return render_template(
        'questionario-sucesso.html',
        title='Questionário enviado!',
        data=data,
        posicoes=dict(POSICOES),
        competicoes=dict(COMPETICOES),
        tecnicos=dict(TECNICOS),
    )
