"""IO com serviços externos (whatsapp/: Graph API e webhook)."""
