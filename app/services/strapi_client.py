import httpx
from typing import Any, Dict, List, Optional, Tuple
from loguru import logger
from app.core.config import CmsConfig
from app.core.errors import CmsConnectionError, CmsError


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class StrapiQuery:
    """
    Builder for Strapi's bracketed query-string convention.

    >>> StrapiQuery().eq("draft", False).sort("pubDate:desc").populate("*").params()
    [('filters[draft][$eq]', 'false'), ('sort', 'pubDate:desc'), ('populate', '*')]
    """

    def __init__(self):
        self._params: List[Tuple[str, str]] = []

    def _filter(self, path: Tuple[str, ...], operator: str, value: Any) -> "StrapiQuery":
        key = "filters" + "".join(f"[{part}]" for part in path) + f"[{operator}]"
        self._params.append((key, _format_value(value)))
        return self

    def eq(self, field: str, value: Any) -> "StrapiQuery":
        return self._filter((field,), "$eq", value)

    def relation_eq(self, relation: str, field: str, value: Any) -> "StrapiQuery":
        """Filter on a field of a related entity, e.g. blog_post.documentId."""
        return self._filter((relation, field), "$eq", value)

    def contains(self, field: str, value: Any) -> "StrapiQuery":
        return self._filter((field,), "$contains", value)

    def paginate(self, page: int, page_size: int) -> "StrapiQuery":
        self._params.append(("pagination[page]", str(page)))
        self._params.append(("pagination[pageSize]", str(page_size)))
        return self

    def sort(self, *fields: str) -> "StrapiQuery":
        self._params.append(("sort", ",".join(fields)))
        return self

    def populate(self, relation: str = "*") -> "StrapiQuery":
        self._params.append(("populate", relation))
        return self

    def params(self) -> List[Tuple[str, str]]:
        return list(self._params)


class StrapiClient:
    """Cliente HTTP para a API REST do Strapi."""
    
    def __init__(self, config: CmsConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Inicializa o cliente com a configuração do CMS.
        
        Args:
            config: URL base, token e timeout do CMS.
            transport: Transporte httpx alternativo (usado nos testes).
        """
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.api_url = f"{self.base_url}/api"
        self.transport = transport
    
    def _default_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.api_token:
            headers["Authorization"] = f"Bearer {self.config.api_token}"
        return headers
    
    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        params: Optional[Any] = None,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Executa uma requisição contra a API do Strapi.
        
        Args:
            endpoint: Caminho relativo a `/api`, ex.: `/blog-posts`.
            method: Método HTTP.
            params: Parâmetros de query (lista de pares ou `StrapiQuery`).
            json: Corpo JSON da requisição.
            headers: Cabeçalhos adicionais; sobrescrevem os padrões.
            
        Returns:
            O JSON decodificado, ou None quando a resposta não tem corpo.
            
        Raises:
            CmsError: Se o status HTTP não for de sucesso.
            CmsConnectionError: Se o CMS não puder ser alcançado.
        """
        if isinstance(params, StrapiQuery):
            params = params.params()
        
        merged_headers = {**self._default_headers(), **(headers or {})}
        url = f"{self.api_url}{endpoint}"
        
        logger.debug(f"{method} {url} params={params}")
        
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.config.timeout) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=merged_headers,
                )
        except httpx.RequestError as e:
            logger.error(f"Erro na conexão com o Strapi: {str(e)}")
            raise CmsConnectionError(str(e)) from e
        
        if not response.is_success:
            detail = None
            try:
                detail = response.json()
            except ValueError:
                detail = response.text
            logger.warning(f"Erro HTTP do Strapi: {response.status_code} {response.reason_phrase} - {detail}")
            raise CmsError(response.status_code, response.reason_phrase, detail)
        
        if not response.content:
            return None
        return response.json()
