import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import ConversionFailed, NoQuotesAvailable, RequestFailed

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(NoQuotesAvailable)
	async def no_quotes_handler(request: Request, exc: NoQuotesAvailable):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(RequestFailed)
	async def request_failed_handler(request: Request, exc: RequestFailed):
		logger.error(f'Comparison request failed: {exc}')
		return JSONResponse(status_code=502, content={'detail': str(exc)})

	@app.exception_handler(ConversionFailed)
	async def conversion_failed_handler(request: Request, exc: ConversionFailed):
		logger.error(f'Conversion failed: {exc}')
		return JSONResponse(status_code=503, content={'detail': str(exc)})
