"""Rate limiter for managing API request rates."""

import time
from collections import deque
from threading import Lock

class RateLimiter:
    """Rate limiter that ensures operations don't exceed a specified rate."""
    
    def __init__(self, max_requests: int = 10, time_window: float = 1.0):
        """Initialize the rate limiter.
        
        Args:
            max_requests (int): Maximum number of requests allowed in the time window.
                A value of 0 or less disables limiting.
            time_window (float): Time window in seconds
        """
        self.max_requests = max_requests
        self.time_window = time_window
        self.requests = deque()
        self.lock = Lock()
    
    def wait_for_slot(self):
        """Wait until a request slot is available.
        
        This method will block until a request can be made without exceeding
        the rate limit.
        """
        if self.max_requests <= 0:
            return

        with self.lock:
            now = time.monotonic()
            
            # Remove old requests from the window
            while self.requests and now - self.requests[0] >= self.time_window:
                self.requests.popleft()
            
            # If we've hit the limit, wait until the oldest request expires
            if len(self.requests) >= self.max_requests:
                sleep_time = self.requests[0] + self.time_window - now
                if sleep_time > 0:
                    time.sleep(sleep_time)
                now = time.monotonic()
                self.requests.popleft()
            
            self.requests.append(now)
