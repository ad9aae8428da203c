import logging
import signal

import psutil

from smallsh.config import KILL_TIMEOUT

logger = logging.getLogger(__name__)


class JobTracker:
    """Background jobs: pid → Popen, reaped lazily before each prompt."""

    def __init__(self):
        self.background_jobs = {}

    def add(self, proc):
        """Track a background job and announce it"""
        self.background_jobs[proc.pid] = proc
        print(f"Background process is {proc.pid}", flush=True)
        logger.debug("tracking background job %d", proc.pid)

    def reap(self):
        """
        Poll every tracked job without blocking.

        Finished jobs are dropped from the registry and one report line per
        job is returned, in registry order.
        """
        reports = []
        for pid, proc in list(self.background_jobs.items()):
            returncode = proc.poll()
            if returncode is None:
                continue
            del self.background_jobs[pid]
            if returncode < 0:
                reports.append(f"Process {pid} terminated with signal {-returncode}")
            else:
                reports.append(f"Process {pid} ended with status {returncode}")
            logger.debug("reaped background job %d (returncode %d)", pid, returncode)
        return reports

    def report(self):
        for line in self.reap():
            print(line, flush=True)

    def kill_all(self, timeout=KILL_TIMEOUT):
        """SIGKILL every outstanding job and collect them"""
        procs = []
        for pid, popen in self.background_jobs.items():
            if popen.poll() is not None:
                continue
            try:
                proc = psutil.Process(pid)
                proc.send_signal(signal.SIGKILL)
                procs.append(proc)
            except psutil.NoSuchProcess:
                pass
            except psutil.AccessDenied as e:
                logger.warning("could not kill background job %d: %s", pid, e)

        if procs:
            _, alive = psutil.wait_procs(procs, timeout=timeout)
            for proc in alive:
                logger.warning("background job %d survived SIGKILL", proc.pid)
        # let Popen record the exit status so no zombie is left behind
        for popen in self.background_jobs.values():
            popen.poll()
        logger.info("killed %d background job(s)", len(procs))
        self.background_jobs.clear()
