from camera.camera import Camera, background

__all__ = ["Camera", "background"]
