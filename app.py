from flask import Flask, render_template
import os
from models import db
from flask_migrate import Migrate
from routes import contato_bp, questionario_bp
from werkzeug.exceptions import HTTPException

###################################################################################################################
# Set FLASK_DEBUG=1 for local development/testing
debug = os.environ.get('FLASK_DEBUG') == '1'
###################################################################################################################

migrate = Migrate()


def create_app(test_config=None):
    app = Flask(__name__)
    app.secret_key = os.environ.get('SECRET_KEY', 'secret123')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///contatos.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    if test_config is not None:
        app.config.update(test_config)

    db.init_app(app)
    migrate.init_app(app, db)

    with app.app_context():
        db.create_all()

    app.register_blueprint(contato_bp, url_prefix='/contato')
    app.register_blueprint(questionario_bp, url_prefix='/questionario')

    #####################################################
    # Route for the home page
    #####################################################
    @app.route('/')
    def index():
        return render_template('index.html', title='Formulários')

    #######################################################
    # Error Handler for 404 Not Found Error
    #######################################################
    @app.errorhandler(404)
    def not_found(e):
        return render_template("404.html", title='Página não encontrada'), 404

    #######################################################
    # Error Handler for 500 Internal Server Error
    #######################################################
    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return e
        # Log the exception
        app.logger.error(f"Unhandled Exception: {e}")
        # Show a friendly error page
        return render_template('error.html', title='Erro', error=str(e)), 500

    return app


if __name__ == '__main__':
    create_app().run(debug=debug)
