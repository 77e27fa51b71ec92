"""
Recruitment Admin
Admin backend for a recruitment site: notices, applicants, inquiries, resume downloads.

Architecture:
- MySQL/PostgreSQL: notices, applicants, inquiries (inquiries table owned by the public site)
- MongoDB: uploaded resume files, base64-encoded
"""

__version__ = "1.0.0"
