from flask_wtf import FlaskForm


class FormularioBase(FlaskForm):

    class Meta:
        csrf = False

    # field name -> functions applied to the value once the field validated
    sanitizadores = {}

    def custom_validate(self):
        validated = self.validate()
        return validated, self

    @property
    def erros(self):
        return {field.name: field.errors[0] for field in self if field.errors}

    def dados(self):
        dados = {}
        for field in self:
            valor = field.data
            if not field.errors:
                for sanitizador in self.sanitizadores.get(field.name, ()):
                    valor = sanitizador(valor)
            dados[field.name] = valor
        return dados
