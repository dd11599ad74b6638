"""
HTML bodies for notification emails.
"""
import html


def application_status_update_template(job_title: str) -> str:
    """Email sent to an applicant when a recruiter changes their application status."""
    safe_title = html.escape(job_title)
    return f"""\
<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; background-color: #f4f4f7; padding: 24px;">
    <div style="max-width: 560px; margin: 0 auto; background: #ffffff; border-radius: 8px; padding: 32px;">
      <h2 style="color: #1f2937; margin-top: 0;">Application Update</h2>
      <p style="color: #374151;">Hello,</p>
      <p style="color: #374151;">
        The status of your application for <strong>{safe_title}</strong> has been updated.
      </p>
      <p style="color: #374151;">Log in to the job portal to see the details.</p>
      <p style="color: #9ca3af; font-size: 12px; margin-bottom: 0;">
        This is an automated message, please do not reply.
      </p>
    </div>
  </body>
</html>
"""
