# core/logger.py
from core.db import SessionLocal
from models.audit_log import AuditLog
from datetime import datetime

def log_action(user_email: str, action: str, session_factory=None):
    """Record an admin or user action into the audit log."""
    session = (session_factory or SessionLocal)()
    try:
        log = AuditLog(user_email=user_email, action=action, timestamp=datetime.utcnow())
        session.add(log)
        session.commit()
        return True
    except Exception as e:
        print("Audit log error:", e)
        session.rollback()
        return False
    finally:
        session.close()
