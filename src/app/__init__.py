"""Core dos nodes WhatsApp.

bootstrap/ liga app/ aos adapters de api/; coordinators/ implementa os
nodes; use_cases/ contém envio, análise de Flow e execução em lote;
domain/ valida parâmetros do host; protocols/ define modelos e portas.
"""
