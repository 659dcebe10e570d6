"""
Downloader com cache (explicação para leigos)

Este arquivo contém o componente que busca páginas do Wowhead para o resto
do pipeline. A ideia principal é:

- olhar primeiro no cache em disco: se a página já foi baixada antes, usamos
  a cópia local e NÃO acessamos a rede;
- se não estiver no cache, esperar um pouco (pacing) para não irritar o site,
  baixar a página e gravar no cache antes de devolvê-la;
- contar quantas páginas vieram do cache e quantas vieram da rede.

Comentários simples:
- "cache": uma pasta com um arquivo por URL. Rodar o pipeline de novo só
  baixa o que ainda não existe lá.
- "pacing": no máximo uma requisição por intervalo configurado
  (`request_delay` segundos).
"""

from __future__ import annotations

import time
from typing import Callable

from prefect.logging import get_logger

from hunter_data.core.scraping.cache import CacheStore
from hunter_data.core.scraping.fetcher import Fetcher

logger = get_logger(__name__)


class CachedDownloader:
    """Busca bytes de uma URI consultando o cache antes da rede.

    Para um leigo:
    - Você chama `CachedDownloader(cache).fetch(url)` e recebe os bytes.
    - Se der erro de rede (status diferente de 200) o `Fetcher` levanta
      `FetchError` e nada é gravado no cache.

    `clock` e `sleep` podem ser trocados nos testes para não esperar de verdade.
    """

    def __init__(
        self,
        cache: CacheStore,
        fetcher: Fetcher | None = None,
        request_delay: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.cache = cache
        # se nenhum fetcher for passado, criamos um padrão
        self.fetcher = fetcher or Fetcher()
        self.request_delay = request_delay
        self._clock = clock
        self._sleep = sleep
        self._last_request: float | None = None
        self.cache_hits = 0
        self.network_fetches = 0

    def _wait_for_slot(self) -> None:
        # garante no máximo uma requisição por `request_delay` segundos
        if self.request_delay <= 0:
            return
        if self._last_request is None:
            wait = self.request_delay
        else:
            elapsed = self._clock() - self._last_request
            wait = self.request_delay - elapsed
        if wait > 0:
            self._sleep(wait)

    def fetch(self, uri: str, paced: bool = False) -> bytes:
        """Devolve os bytes de `uri`, do cache ou da rede.

        Passo a passo:
        1. Se `uri` está no cache, lê e devolve (sem rede, sem espera).
        2. Senão, se `paced=True`, espera o intervalo de pacing.
        3. Baixa via `fetcher.fetch` (levanta `FetchError` se status != 200).
        4. Grava no cache e só então devolve os bytes.
        """
        if self.cache.is_cached(uri):
            self.cache_hits += 1
            logger.debug("Cache hit: %s", uri)
            return self.cache.read(uri)

        if paced:
            self._wait_for_slot()
        logger.info("Downloading %s", uri)
        self._last_request = self._clock()
        data = self.fetcher.fetch(uri)
        self.network_fetches += 1
        self.cache.write(uri, data)
        return data
