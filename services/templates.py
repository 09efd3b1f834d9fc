"""
HTML page for the campaign booking form.

The page posts JSON to /api/booking, shows field errors inline and
toast notifications, and keeps the submit button disabled while a
request is in flight.
"""

from html import escape
from typing import Dict, Optional

from services.errors import SUBMISSION_FALLBACK_MESSAGE

# (wire name, label, placeholder, widget, input type)
FIELDS = [
    ("name", "Name *", "Your full name", "input", "text"),
    ("businessName", "Business Name *", "Your business name", "input", "text"),
    ("businessLink", "Business Website *", "yourbusiness.com", "input", "text"),
    ("email", "Email Address", "your@email.com", "input", "email"),
    ("phoneNumber", "Phone Number", "+1 (555) 000-0000", "input", "tel"),
    ("industry", "Industry *", "e.g., Technology, Healthcare, Finance", "input", "text"),
    ("targetAudience", "Current Target Audience (Optional)", "Describe your target audience...", "textarea", ""),
    ("keyMessage", "Key Message to Communicate (Optional)", "What message do you want to convey?", "textarea", ""),
    ("visualReferences", "Visual References/Examples (Optional)", "Paste links to visual references or examples...", "textarea", ""),
]

CONTACT_HINT = "* At least one contact method (email or phone) is required"
SUBMIT_LABEL = "Submit Booking Request"
SUBMITTING_LABEL = "Submitting..."

_STYLE = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
        background: #f8fafc;
        color: #0f172a;
        padding: 48px 16px;
    }
    .container { max-width: 672px; margin: 0 auto; }
    .header { text-align: center; margin-bottom: 32px; }
    .header h1 { font-size: 30px; font-weight: 700; }
    .header p { margin-top: 8px; color: #64748b; }
    .field { margin-bottom: 24px; }
    label { display: block; font-size: 14px; font-weight: 500; margin-bottom: 8px; }
    input, textarea {
        width: 100%;
        padding: 10px 12px;
        border: 1px solid #e2e8f0;
        border-radius: 6px;
        font-size: 14px;
        font-family: inherit;
    }
    textarea { min-height: 80px; }
    .error { color: #dc2626; font-size: 13px; margin-top: 6px; min-height: 0; }
    .hint { color: #64748b; font-size: 14px; margin: -12px 0 24px; }
    button {
        width: 100%;
        padding: 12px;
        border: none;
        border-radius: 6px;
        background: #0f172a;
        color: white;
        font-size: 15px;
        cursor: pointer;
    }
    button:disabled { opacity: 0.6; cursor: not-allowed; }
    .toast {
        position: fixed; right: 16px; bottom: 16px; max-width: 360px;
        padding: 16px; border-radius: 8px; background: white;
        border: 1px solid #e2e8f0; box-shadow: 0 10px 30px rgba(0,0,0,0.1);
        display: none;
    }
    .toast.destructive { background: #dc2626; color: white; border-color: #dc2626; }
    .toast strong { display: block; margin-bottom: 4px; }
"""

_SCRIPT = """
    const form = document.getElementById('booking-form');
    const button = document.getElementById('button-submit');
    const toast = document.getElementById('toast');
    let isSubmitting = false;

    function notify(title, description, variant) {
        toast.className = 'toast' + (variant === 'destructive' ? ' destructive' : '');
        toast.querySelector('strong').textContent = title;
        toast.querySelector('span').textContent = description;
        toast.style.display = 'block';
        setTimeout(() => { toast.style.display = 'none'; }, 5000);
    }

    function showErrors(errors) {
        document.querySelectorAll('[data-error-for]').forEach((el) => {
            el.textContent = errors[el.dataset.errorFor] || '';
        });
    }

    form.addEventListener('submit', async (event) => {
        event.preventDefault();
        if (isSubmitting) return;
        isSubmitting = true;
        button.disabled = true;
        button.textContent = '%(submitting)s';
        try {
            const values = Object.fromEntries(new FormData(form).entries());
            const response = await fetch('/api/booking', {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify(values),
            });
            const data = await response.json();
            showErrors(data.errors || {});
            if (data.notification) {
                const n = data.notification;
                notify(n.title, n.description, n.variant);
            }
            if (data.ok) form.reset();
        } catch (error) {
            notify('Error', '%(fallback)s', 'destructive');
        } finally {
            isSubmitting = false;
            button.disabled = false;
            button.textContent = '%(submit)s';
        }
    });
"""


def _render_field(name: str, label: str, placeholder: str, widget: str, input_type: str,
                  value: str, error: str) -> str:
    test_id = "input-" + "".join("-" + c.lower() if c.isupper() else c for c in name)
    attrs = (
        f'id="{name}" name="{name}" placeholder="{escape(placeholder)}" '
        f'data-testid="{test_id}"'
    )
    if widget == "textarea":
        control = f"<textarea {attrs}>{escape(value)}</textarea>"
    else:
        control = f'<input type="{input_type}" {attrs} value="{escape(value)}">'

    html = (
        f'<div class="field">'
        f'<label for="{name}">{escape(label)}</label>'
        f"{control}"
        f'<p class="error" data-error-for="{name}">{escape(error)}</p>'
        f"</div>"
    )
    if name == "phoneNumber":
        html += f'<p class="hint">{escape(CONTACT_HINT)}</p>'
    return html


def render_booking_form(
    values: Optional[Dict[str, str]] = None,
    errors: Optional[Dict[str, str]] = None,
    is_submitting: bool = False,
) -> str:
    """Generate the booking form page."""
    values = values or {}
    errors = errors or {}

    fields_html = "\n".join(
        _render_field(name, label, placeholder, widget, input_type,
                      str(values.get(name) or ""), errors.get(name, ""))
        for name, label, placeholder, widget, input_type in FIELDS
    )
    button_label = SUBMITTING_LABEL if is_submitting else SUBMIT_LABEL
    disabled = " disabled" if is_submitting else ""
    script = _SCRIPT % {
        "submit": SUBMIT_LABEL,
        "submitting": SUBMITTING_LABEL,
        "fallback": SUBMISSION_FALLBACK_MESSAGE,
    }

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Book Your Campaign</title>
    <style>{_STYLE}</style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1 data-testid="text-form-title">Book Your Campaign</h1>
            <p>Fill out the form below to get started</p>
        </div>
        <form id="booking-form" novalidate>
            {fields_html}
            <button type="submit" id="button-submit" data-testid="button-submit"{disabled}>{button_label}</button>
        </form>
    </div>
    <div id="toast" class="toast" role="status"><strong></strong><span></span></div>
    <script>{script}</script>
</body>
</html>'''
