from django.conf import settings
from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.contrib.auth.decorators import permission_required
from django.shortcuts import render, redirect
from django.utils.translation import gettext_lazy as _
from django_smart_ratelimit import rate_limit

from .forms import FieldOptionsForm
from .options import field_options


@staff_member_required
@permission_required('config.change_platformsetting', raise_exception=True)
@rate_limit(key='user', rate=f'{settings.USER_RATELIMIT_PER_HOUR}/h')
def field_settings(request):
    """
    Einstellungsseite für die Geburtsdaten‑Felder.

    Speichern schlägt nie fehl: unbekannte Werte werden verworfen, alle
    anderen Einstellungen bleiben erhalten.
    """
    options = field_options()

    if request.method == 'POST':
        form = FieldOptionsForm(request.POST, options=options)
        if form.is_valid():
            form.save()
            messages.success(request, _('Settings saved.'))
            return redirect('birthday_field_settings')
    else:
        form = FieldOptionsForm(options=options)

    return render(request, 'birthday/field_settings.html', {
        'form': form,
        'title': _('Additional Order Fields for Birthday Details'),
        "PLATFORM_NAME": settings.PLATFORM_NAME,
        "STRING_TO_ADMIN_PATH": settings.STRING_TO_ADMIN_PATH,
    })
