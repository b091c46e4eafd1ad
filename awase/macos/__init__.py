"""macOS virtual keycode and CGEventFlags conversion tables."""