from courtgrouper.controllers.session.session_manager import SessionManager

__all__ = ["SessionManager"]
