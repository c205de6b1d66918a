#
# Copyright 2023 Windell H. Oskay, Evil Mad Scientist Laboratories
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA  02111-1307  USA

"""
operation_queue.py

Run controller operations one at a time, in submission order, on a single
worker thread. Each operation finishes, including its paced wait, before the
next one starts; its on_done callback is then called with True or False.

"""

import logging
import queue
import threading

from cncserver.errors import CNCServerError

logger = logging.getLogger(__name__)


class OperationQueue:
    ''' OperationQueue: FIFO of operations drained by one worker thread '''

    def __init__(self, name='cncserver-worker'):
        self.name = name
        self._queue = queue.Queue()
        self._worker = None
        self._lock = threading.Lock() # Guards worker start-up only

    def _ensure_worker(self):
        with self._lock:
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(target=self._run, name=self.name,
                    daemon=True)
                self._worker.start()

    def submit(self, operation, args=(), on_done=None):
        ''' Queue operation(*args); on_done(success) is called when it has finished '''
        self._ensure_worker()
        self._queue.put((operation, args, on_done))

    def join(self):
        ''' Block until every queued operation has finished '''
        self._queue.join()

    def stop(self):
        ''' Let the worker exit once the operations queued so far are done '''
        if self._worker is not None and self._worker.is_alive():
            self._queue.put(None)
            self._worker.join()
        self._worker = None

    def _run(self):
        while True:
            item = self._queue.get()
            try:
                if item is None:
                    return
                operation, args, on_done = item
                success = self._execute(operation, args)
                if on_done is not None:
                    self._notify(on_done, success)
            finally:
                self._queue.task_done()

    @staticmethod
    def _notify(on_done, success):
        try:
            on_done(success)
        except Exception: # pylint: disable=broad-except
            logger.exception('on_done callback %s failed', getattr(on_done, '__name__', on_done))

    @staticmethod
    def _execute(operation, args):
        try:
            return bool(operation(*args))
        except CNCServerError as err:
            logger.error(str(err))
        except Exception: # pylint: disable=broad-except
            logger.exception('Operation %s failed', getattr(operation, '__name__', operation))
        return False
