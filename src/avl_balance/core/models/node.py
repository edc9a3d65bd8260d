from typing import Any, Optional


class AVLNode:
    """
    Nó da Árvore AVL.
    Armazena a chave, um valor opcional e a altura em cache.
    Cada filho pertence exclusivamente a este nó (sem compartilhamento).
    """
    def __init__(self, key: Any, value: Any = None):
        self.key = key
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Altura inicial de uma folha é 1

    def __repr__(self):
        return f"AVLNode(key={self.key!r}, height={self.height})"
