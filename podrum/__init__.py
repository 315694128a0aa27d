"""Building blocks for a Minecraft Bedrock server: binary streams, NBT, compression, base64, JSON, JWT payloads, commands and logging."""

__version__ = "0.1.0"

__all__ = [
    "binarystream",
    "logger",
    "nbt",
    "compression",
    "jsonscalars",
    "base64codec",
    "commands",
    "jsonparser",
    "jwtdecode",
]