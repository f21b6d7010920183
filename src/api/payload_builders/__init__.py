"""Construção de payloads para APIs externas (whatsapp/)."""
