from chains.dto import ChainConfig


class ChainRegistry:
    def __init__(self, chains: list[ChainConfig]):
        self._chains: dict[str, ChainConfig] = {}
        for cfg in chains:
            self._chains[cfg.name] = cfg

    def get(self, name: str) -> ChainConfig | None:
        return self._chains.get(name)

    def list(self) -> list[ChainConfig]:
        return list(self._chains.values())
