"""Erros compartilhados entre app/ e api/."""


class ValidationError(Exception):
    """Parâmetro do usuário viola uma restrição estrutural da mensagem.

    A mensagem é curta e estável (ex: "invalid flow data"), pois vira o
    campo `error` do item de saída.
    """
