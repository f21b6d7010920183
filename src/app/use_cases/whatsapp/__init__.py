from .analyze_flow_response import AnalyzeFlowResponseUseCase
from .send_interactive_message import SendInteractiveMessageUseCase, first_message_id

__all__ = ["AnalyzeFlowResponseUseCase", "SendInteractiveMessageUseCase", "first_message_id"]
