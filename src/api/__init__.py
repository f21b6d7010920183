"""Camada de borda do canal WhatsApp.

connectors/ faz o IO (Graph API e webhook), normalizers/ lê envelopes
de webhook, payload_builders/ e validators/ preparam o envio e routes/
expõe tudo via HTTP. Política de lote e orquestração ficam em app/.
"""
