"""
どこで: `engine.core` サブパッケージ。
何を: `Camera`（3 行列の合成と中心付きズーム）、行列の配列一括適用、カメラ状態の永続化を提供。
なぜ: 代数層（`planar`）の上に、描画/シミュレーション前段から使う視点管理を構成するため。
"""

from .camera import Camera
from .persistence import load_camera, save_camera

__all__ = ["Camera", "load_camera", "save_camera"]
