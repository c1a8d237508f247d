from .registry import SessionRegistry
from .controller import SendFn, SubmitOutcome, SessionController
from .inputs import InputKind, SessionInput

__all__ = ["InputKind", "SendFn", "SessionController", "SessionInput", "SessionRegistry", "SubmitOutcome"]
