from wtforms.fields import Field


class ListaField(Field):
    # one value or many, always a list; a lone empty value is an empty list

    def process_data(self, value):
        self.data = list(value) if value else []

    def process_formdata(self, valuelist):
        self.data = list(valuelist) if any(valuelist) else []

    def _value(self):
        return self.data or []
