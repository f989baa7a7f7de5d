from .grid_codec import decode_grid, dump_grid, encode_grid, load_grid, supports_structured

__all__ = ["encode_grid", "decode_grid", "dump_grid", "load_grid", "supports_structured"]
