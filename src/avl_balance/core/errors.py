class BalancePreconditionError(ValueError):
    """
    Violação de contrato do balanceador: nó ausente, filho obrigatório
    ausente para a rotação escolhida, ou desequilíbrio maior do que uma
    única chamada de balanceamento consegue corrigir.
    """
