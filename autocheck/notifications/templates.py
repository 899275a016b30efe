"""
Gabarits des emails envoyés après un paiement confirmé.
- Confirmation client (destinataire: customer_email de la session)
- Notification admin (destinataire: boîte interne), avec le détail de la demande
"""
from dataclasses import dataclass
from html import escape

from autocheck.payments.metadata import OrderDetails

CUSTOMER_SUBJECT = "Your Vehicle Check Report Order Confirmation"
ADMIN_SUBJECT = "New Vehicle Check Request"
NOT_PROVIDED = "Not provided"


@dataclass(frozen=True)
class NotificationEmail:
    """L'expéditeur n'y figure pas: il est fixé par la ConnectionConfig du mailer."""

    to: str
    subject: str
    html: str


def format_amount(amount_total: int) -> str:
    """Montant en centimes -> dollars à deux décimales (2000 -> "20.00")."""
    return f"{amount_total / 100:.2f}"


def _e(value: str) -> str:
    return escape(value or "", quote=False)


def compose_customer_email(order: OrderDetails) -> NotificationEmail:
    html = f"""
    <p>Dear {_e(order.full_name)},</p>

    <p>Thank you for purchasing the Clear Auto Check Report. We appreciate your trust in our service.</p>

    <p>We are currently working on your report, and you can expect to receive it within the next 24 hours. Our team is making sure all the details are accurate and complete to help you make an informed decision.</p>

    <p>If you have any questions in the meantime, feel free to reach out.</p>

    <p>Best regards,<br>
    Clear Auto Check</p>
    """
    return NotificationEmail(to=order.customer_email, subject=CUSTOMER_SUBJECT, html=html)


def compose_admin_email(order: OrderDetails, admin_email: str) -> NotificationEmail:
    html = f"""
    <h2>New Vehicle Check Request</h2>
    <p>A user has paid for a vehicle check:</p>
    <ul>
      <li><strong>Vehicle Identifier</strong>: {_e(order.vehicle_identifier)}</li>
      <li><strong>Full Name</strong>: {_e(order.full_name)}</li>
      <li><strong>Email</strong>: {_e(order.customer_email)}</li>
      <li><strong>Phone</strong>: {_e(order.phone) or NOT_PROVIDED}</li>
      <li><strong>Country</strong>: {_e(order.country)}</li>
      <li><strong>State/Province</strong>: {_e(order.state) or NOT_PROVIDED}</li>
      <li><strong>Payment Amount</strong>: ${format_amount(order.amount_total)} USD</li>
      <li><strong>Session ID</strong>: {_e(order.session_id)}</li>
    </ul>
    <p>Please process the report.</p>
    """
    return NotificationEmail(to=admin_email, subject=ADMIN_SUBJECT, html=html)
