"""GUI package: interface graphique pygame pour deux joueurs humains.

Modules:
- geometry: conversions case <-> pixels
- renderer: rendu du damier, des pièces et des surbrillances
- board_controller: sélection de la pièce puis de la case d'arrivée
"""

__all__ = [
    "geometry",
    "renderer",
    "board_controller",
]
