import threading
import time

from hello_crm.server import ListenerState

START_TIMEOUT = 10


def serve_in_thread(server):
    """Run a GreeterServer in a daemon thread and wait for its listener."""
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    deadline = time.time() + START_TIMEOUT
    while server.state is not ListenerState.LISTENING:
        if not thread.is_alive():
            raise RuntimeError("server thread exited before binding")
        if time.time() > deadline:
            raise RuntimeError("server did not start in time")
        time.sleep(0.05)
    return thread


def stop(server, thread):
    server.should_exit = True
    thread.join(timeout=START_TIMEOUT)
