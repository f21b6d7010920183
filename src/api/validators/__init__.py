"""Validação estrutural antes do envio (whatsapp/: limites da Cloud API)."""
