"""
This is the simple task-queue version of a scheduler.

Only one run ever goes at a time. A run submitted while another is in
progress (say, by a host callback during a yield) waits its turn, and
the queue drains in order on whichever thread is already draining it.
"""
from collections import deque
from concurrent.futures import Future
from threading import Lock

class Task:
	def proceed(self):
		raise NotImplementedError(type(self))

class SimpleTask(Task):
	""" A job and its arguments, plus a Future for whoever is waiting on the outcome. """
	def __init__(self, job, *args, **kwargs):
		assert callable(job)
		self._job = job
		self._args = args
		self._kwargs = kwargs
		self.future = Future()

	def proceed(self):
		if not self.future.set_running_or_notify_cancel():
			return
		try:
			result = self._job(*self._args, **self._kwargs)
		except BaseException as ex:
			self.future.set_exception(ex)
		else:
			self.future.set_result(result)

class RunQueue:
	def __init__(self):
		self._mutex = Lock()
		self._tasks = deque()
		self._busy = False

	def submit(self, task:SimpleTask) -> Future:
		with self._mutex:
			self._tasks.append(task)
		self.drain()
		return task.future

	@property
	def busy(self) -> bool: return self._busy

	def drain(self):
		""" Run tasks until none remain, unless some caller up the stack is already doing so. """
		with self._mutex:
			if self._busy: return
			self._busy = True
		while True:
			with self._mutex:
				if not self._tasks:
					self._busy = False
					return
				task = self._tasks.popleft()
			# SimpleTask.proceed does not raise; the Future gets the outcome.
			task.proceed()
