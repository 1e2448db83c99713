from .orchestrator import Orchestrator
from ..config import StreamDescriptor, get_env, read_stream_descriptors
from ..utils import log, resolve_output_prefix


class CaptureRunner:
    def __init__(self):
        self.__env = get_env()
        log.is_prod = self.__env.env == "prod"
        log.set_level(self.__env.log_level)
        self.descriptors = self.__read_descriptors()
        self.orchestrator = Orchestrator(self.descriptors, self.__env.capture)

    def __read_descriptors(self) -> list[StreamDescriptor]:
        descriptors = read_stream_descriptors(self.__env.config_path)
        result = []
        for desc in descriptors:
            prefix = resolve_output_prefix(desc.output_file_prefix, self.__env.out_dir_path)
            result.append(desc.model_copy(update={"output_file_prefix": prefix}))
        log.info("Loaded stream config", {"path": self.__env.config_path, "streams": len(result)})
        return result

    async def run(self):
        await self.orchestrator.run()

    def cancel(self):
        self.orchestrator.cancel()
