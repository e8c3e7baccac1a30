"""
HISTEQ - Viewer

Minimal smoke-test that opens one image in an OpenCV window.
"""
