"""Software drawing primitives: lines, rectangles, bars, bitmaps and 8x8 text."""

import re

MAX_LINE_LENGTH = 512
CHAR_WIDTH = 8
LINE_HEIGHT = 10

_WORD = re.compile(r"[^ \n]*")


def _cdiv(a, b):
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def wrap_lines(text, wrap_width):
    """Split text into the lines that wrapped drawing produces, 8 pixels per character."""
    lines = []
    line = []
    limit = MAX_LINE_LENGTH - 1

    def append(chars):
        room = limit - len(line)
        if room > 0:
            line.extend(chars[:room])

    def emit():
        lines.append("".join(line))
        line.clear()

    pos = 0
    end = len(text)
    while pos < end:
        if text[pos] == "\n":
            emit()
            pos += 1
            continue
        word_end = _WORD.match(text, pos).end()
        word = text[pos:word_end]
        pos = word_end
        if line and (len(line) + len(word)) * CHAR_WIDTH > wrap_width:
            emit()
        append(word)
        if pos < end and text[pos] == " ":
            append(" ")
            pos += 1
    if line:
        emit()
    return lines


class Renderer:
    """Draws into a FrameBuffer; writes outside the buffer are clipped."""

    def __init__(self, framebuffer, font):
        self.framebuffer = framebuffer
        self.font = font

    def _put(self, x, y, colour):
        fb = self.framebuffer
        if 0 <= x < fb.width and 0 <= y < fb.height:
            fb.pixels[y * fb.width + x] = colour

    def _span(self, x, y, length, colour):
        fb = self.framebuffer
        if not 0 <= y < fb.height:
            return
        start = max(x, 0)
        stop = min(x + length, fb.width)
        if stop > start:
            base = y * fb.width
            fb.pixels[base + start:base + stop] = [colour] * (stop - start)

    def draw_sprite(self, sx, sy, target_width, target_height, sprite, palette):
        """Scale a paletted sprite to the target size; palette index 0 is transparent."""
        source_height = len(sprite)
        source_width = len(sprite[0])
        for ty in range(target_height):
            row = sprite[ty * source_height // target_height]
            for tx in range(target_width):
                index = row[tx * source_width // target_width]
                if index != 0:
                    self._put(sx + tx, sy + ty, palette[index])

    def draw_line(self, x1, y1, x2, y2, colour):
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        step_x = 1 if x1 < x2 else -1
        step_y = 1 if y1 < y2 else -1
        err = dx - dy
        while True:
            self._put(x1, y1, colour)
            if x1 == x2 and y1 == y2:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x1 += step_x
            if e2 < dx:
                err += dx
                y1 += step_y

    def _thick_pixel(self, x, y, thickness, colour):
        offset = thickness // 2
        for j in range(thickness):
            self._span(x - offset, y - offset + j, thickness, colour)

    def draw_thick_line(self, x1, y1, x2, y2, colour, thickness):
        """Draw a line of square blocks, placing a new block only when the last no longer covers the point."""
        half = thickness // 2
        prev = None
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        step_x = 1 if x1 < x2 else -1
        step_y = 1 if y1 < y2 else -1
        err = dx - dy
        while True:
            if prev is None or not (
                prev[0] - half <= x1 <= prev[0] + half and prev[1] - half <= y1 <= prev[1] + half
            ):
                self._thick_pixel(x1, y1, thickness, colour)
                prev = (x1, y1)
            if x1 == x2 and y1 == y2:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x1 += step_x
            if e2 < dx:
                err += dx
                y1 += step_y

    def draw_greyscale_rectangle(self, sx, sy, width, height, colour):
        """Fill a rectangle with the low byte of colour repeated in all four bytes."""
        value = (colour & 0xFF) * 0x01010101
        for y in range(sy, sy + height):
            self._span(sx, y, width, value)

    def draw_colour_rectangle(self, sx, sy, width, height, colour):
        for y in range(sy, sy + height):
            self._span(sx, y, width, colour)

    def draw_progress_bar(self, sx, sy, width, height, progress, body_colour, border_colour):
        """Horizontal bar filled left to right; progress is a percentage clamped to 0-100."""
        fraction = max(0.0, min(100.0, progress)) / 100
        self.draw_colour_rectangle(sx, sy, width, height, border_colour)
        self.draw_colour_rectangle(sx + 1, sy + 1, int(width * fraction) - 2, height - 2, body_colour)

    def draw_vertical_progress_bar(self, sx, sy, width, height, progress, body_colour, border_colour):
        """Vertical bar filled bottom to top; progress is a percentage clamped to 0-100."""
        fraction = max(0.0, min(100.0, progress)) / 100
        self.draw_colour_rectangle(sx, sy, width, height, border_colour)
        fill = max(int(height * fraction), 2)
        self.draw_colour_rectangle(sx + 1, sy + height - fill + 1, width - 2, fill - 2, body_colour)

    def draw_bitmap(self, bits, sx, sy, colour, scale):
        """Draw an 8-row bitmap whose least significant bit is the leftmost pixel."""
        for row, byte in enumerate(bits):
            for dy in range(scale):
                y = sy + row * scale + dy
                for col in range(8):
                    if byte & (1 << col):
                        self._span(sx + col * scale, y, scale, colour)

    def draw_bitmap32(self, bits, sx, sy, colour, scale):
        """Draw a 32x32 bitmap given as rows of four bytes, most significant bit leftmost."""
        for row, row_bytes in enumerate(bits):
            for dy in range(scale):
                y = sy + row * scale + dy
                for col in range(32):
                    if row_bytes[col // 8] & (1 << (7 - col % 8)):
                        self._span(sx + col * scale, y, scale, colour)

    def draw_char(self, c, sx, sy, colour, scale):
        """Draw one printable ASCII character from the 8x8 font."""
        code = ord(c)
        if code < 32 or code > 127 or scale < 1:
            return
        self.draw_bitmap(self.font[code - 32], sx, sy, colour, scale)

    def draw_string(self, text, sx, sy, colour, scale):
        advance = CHAR_WIDTH * scale
        for i, c in enumerate(text):
            self.draw_char(c, sx + i * advance, sy, colour, scale)

    def draw_string_centered(self, text, x1, x2, sy, colour, scale):
        centre = _cdiv(x1 + x2, 2)
        text_width = len(text) * CHAR_WIDTH * scale
        self.draw_string(text, centre - _cdiv(text_width, 2) + 1, sy, colour, scale)

    def draw_string_wrapped(self, text, sx, sy, wrap_width, center, colour, scale):
        """Draw word-wrapped text, one line every 10 pixels, optionally centred in wrap_width."""
        for i, line in enumerate(wrap_lines(text, wrap_width)):
            offset = _cdiv(wrap_width - len(line) * CHAR_WIDTH, 2) if center else 0
            self.draw_string(line, sx + offset, sy + i * LINE_HEIGHT, colour, scale)

    def draw_gridlines(self, x_lines, y_lines, colour):
        """Split the frame into x_lines by y_lines cells with one-pixel lines."""
        if x_lines < 2 or y_lines < 2:
            return
        width = self.framebuffer.width
        height = self.framebuffer.height
        x_spacing = width // x_lines
        y_spacing = height // y_lines
        for i in range(1, y_lines):
            y = min(max(i * y_spacing, 0), height - 1)
            self.draw_line(0, y, width - 1, y, colour)
        for i in range(1, x_lines):
            x = min(max(i * x_spacing, 0), width - 1)
            self.draw_line(x, 0, x, height - 1, colour)

    def clear(self, colour):
        self.framebuffer.clear(colour)