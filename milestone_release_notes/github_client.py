import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from .models import Issue, Milestone, Repository

logger = logging.getLogger(__name__)

PER_PAGE = 100
TIMEOUT = 30


class GitHubClient:
	"""Client to interact with the GitHub API."""

	def __init__(self, token: str):
		self.session = requests.Session()
		self.session.headers.update(
			{
				"Authorization": f"Bearer {token}",
				"Accept": "application/vnd.github+json",
			}
		)
		retries = Retry(
			total=3,
			backoff_factor=0.1,
			status_forcelist=[500, 502, 503, 504],
			allowed_methods=None,
		)
		self.session.mount("https://", HTTPAdapter(max_retries=retries))

	def _get_all(self, url: str, params: dict[str, str | int] | None = None) -> list[dict]:
		"""Return the items of every page of a paginated list endpoint."""
		items: list[dict] = []
		next_url: str | None = url
		next_params = {**(params or {}), "per_page": PER_PAGE}

		while next_url:
			logger.debug("GET %s", next_url)
			r = self.session.get(next_url, params=next_params, timeout=TIMEOUT)
			r.raise_for_status()
			items.extend(r.json())

			# the next link already carries the query string
			next_url = r.links.get("next", {}).get("url")
			next_params = None

		return items

	def get_milestones(self, repository: Repository) -> list[Milestone]:
		"""Return all open and closed milestones of a repository."""
		data = self._get_all(f"{repository.url}/milestones", params={"state": "all"})
		return [Milestone.from_dict(milestone) for milestone in data]

	def get_issues(self, repository: Repository, milestone: Milestone) -> list[Issue]:
		"""Return the closed issues of a milestone."""
		data = self._get_all(
			f"{repository.url}/issues",
			params={"milestone": milestone.number, "state": "closed"},
		)
		return [Issue.from_dict(issue) for issue in data]

	def count_commits_between(
		self,
		repository: Repository,
		previous: Milestone | None,
		target: Milestone,
	) -> int:
		"""Count the commits between the tags named after two milestones.

		Without a previous milestone, count all commits up to the target tag.
		If the tag doesn't exist yet, there are no commits to count.
		"""
		try:
			if previous is None:
				return len(self._get_all(f"{repository.url}/commits", params={"sha": target.title}))

			r = self.session.get(
				f"{repository.url}/compare/{previous.title}...{target.title}",
				timeout=TIMEOUT,
			)
			r.raise_for_status()
			return r.json()["total_commits"]
		except requests.HTTPError as e:
			if e.response is not None and e.response.status_code == 404:
				if previous is None:
					logger.warning("No tag %s found in %s, assuming no commits", target.title, repository)
				else:
					logger.warning(
						"Tag %s or %s not found in %s, assuming no commits",
						previous.title,
						target.title,
						repository,
					)
				return 0
			raise

	def create_release(
		self,
		repository: Repository,
		tag: str,
		name: str,
		body: str,
		draft: bool = True,
	) -> dict:
		"""Create a release for a tag and return the created release."""
		response = self.session.post(
			f"{repository.url}/releases",
			json={
				"tag_name": tag,
				"name": name,
				"body": body,
				"draft": draft,
			},
			timeout=TIMEOUT,
		)
		response.raise_for_status()
		return response.json()
