from flask import current_app
from flask_mail import Message


def send_contact_notification(submission):
    """Mail the business about a new contact form submission.

    Does nothing unless CONTACT_NOTIFY_EMAIL and MAIL_USERNAME are set.
    Returns True when a message was handed to the mail server.
    """
    recipient = current_app.config.get('CONTACT_NOTIFY_EMAIL')
    if not recipient or not current_app.config.get('MAIL_USERNAME'):
        return False

    site_name = current_app.config.get('SITE_NAME')
    email_body = f"""
New enquiry from the {site_name} website:

Name: {submission.get('name', '')}
Phone: {submission.get('phone', '')}
Shift: {submission.get('shift', '')}

Message:
{submission.get('message') or '-'}
"""

    try:
        from drishti import mail
        msg = Message(
            subject=f"{site_name} - New enquiry from {submission.get('name', 'visitor')}",
            recipients=[recipient],
            body=email_body,
            sender=current_app.config['MAIL_DEFAULT_SENDER']
        )
        mail.send(msg)
        current_app.logger.info(f"Contact notification sent to {recipient}")
        return True
    except Exception as e:
        current_app.logger.error(f"Error sending contact notification: {str(e)}")
        return False
