# ==================================================
# bin2bmp/const.py
# ==================================================
BITMAP_ID = 0x4D42           # "BM" read as a little-endian u16
BITMAP_HEADER_SIZE = 0x8A    # 14‑byte file header + 124‑byte V5 DIB header
DIB_HEADER_SIZE = BITMAP_HEADER_SIZE - 14
B2B_HEADER_SIZE = 40         # padding_size (I), original_size (I), signature, digest
TOTAL_HEADER_SIZE = BITMAP_HEADER_SIZE + B2B_HEADER_SIZE

BYTES_PER_PIXEL = 4
BITS_PER_PIXEL = BYTES_PER_PIXEL * 8
BI_BITFIELDS = 3

RED_MASK = 0x00FF0000
GREEN_MASK = 0x0000FF00
BLUE_MASK = 0x000000FF
ALPHA_MASK = 0xFF000000
PELS_PER_METER = 4000
LCS_WINDOWS_COLOR_SPACE = 0x57696E20   # "Win "

B2B_SIGNATURE = 0x6FAFEC0D7EF10C4468E85B0B9C0FB9E
DIGEST_PRESENT = 1 << 127
DIGEST_MASK = DIGEST_PRESENT - 1

# id, file_size, unused, offset | dib_size, width, height, planes, bpp,
# compression, pixmap_size, h/v resolution, palette, important, 4 masks,
# colour space | 2×u128 + u32 endpoints | 3 gammas, intent, profile data/size, reserved
BITMAP_HEADER_FMT = "<HIII" "III" "HH" "IIIIIIIIIII" "16s16s" "IIIIIIII"
# padding_size, original_file_size, signature (u128), optional digest (u128)
B2B_HEADER_FMT = "<II16s16s"

U32_MAX = 0xFFFFFFFF
CHUNK_SIZE = 1024            # digest read size
DIGEST_SIZE = 32             # blake2b output before truncation
DIGEST_TRUNCATED_SIZE = 16
BMP_SUFFIX = ".bmp"
