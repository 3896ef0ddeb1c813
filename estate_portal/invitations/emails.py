from html import escape
from typing import Optional

from estate_portal.config import settings
from estate_portal.notifications.email import OutgoingEmail

INVITATION_SUBJECT = "Your Estate Planning Portal Access"


def build_portal_url(invitation_code: str, base_url: Optional[str] = None) -> str:
    base_url = base_url or settings.FRONTEND_URL
    return f"{base_url.rstrip('/')}/#client-portal?code={invitation_code}"


def build_invitation_email(client_name: str, client_email: str, access_code: str, invitation_code: str) -> OutgoingEmail:
    portal_url = build_portal_url(invitation_code)
    name = escape(client_name)

    html = f"""
<h2>Estate Planning Invitation</h2>
<p>Dear {name},</p>
<p>You've been invited to begin your estate planning process with our secure digital platform.</p>
<p><strong>Your Access Code:</strong> {access_code}</p>
<p>Please click the link below to access our secure portal and begin your estate planning journey:</p>
<p><a href="{escape(portal_url)}"
   style="background: #2563eb; color: white; padding: 12px 24px; text-decoration: none; border-radius: 8px;">
   Access Your Estate Planning Portal
</a></p>
<p>If you have any questions, please don't hesitate to contact our office.</p>
<p>Best regards,<br>Your Legal Team</p>
"""

    text = f"""Dear {client_name},

You've been invited to begin your estate planning process with our secure digital platform.

Your Access Code: {access_code}

Access your estate planning portal here:
{portal_url}

If you have any questions, please don't hesitate to contact our office.

Best regards,
Your Legal Team
"""
    return OutgoingEmail(to=client_email, subject=INVITATION_SUBJECT, html=html, text=text)
