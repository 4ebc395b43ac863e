from crispy_forms.helper import FormHelper
from crispy_forms.layout import Submit
from django import forms


class ClaveAdminForm(forms.Form):
    password = forms.CharField(
        label="Contraseña",
        strip=False,
        widget=forms.PasswordInput(attrs={"placeholder": "Ingresa la contraseña", "autofocus": True}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = FormHelper()
        self.helper.form_method = "post"
        self.helper.add_input(Submit("submit", "Acceder", css_class="w-100"))
