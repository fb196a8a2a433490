"""Publishing and interaction flows with coin rewards."""
import logging
from typing import Any, Dict, Iterable, List, Optional

from travel_store.application.services.local_store import LocalStore
from travel_store.domain.entities import (
    User,
    Post,
    Comment,
    Blog,
    BlogComment,
    Query,
    QueryResponse,
    Itinerary,
    Destination,
)


# Coins granted per action
BLOG_REWARD = 20
BLOG_COMMENT_REWARD = 5
ITINERARY_REWARD = 15
QUERY_REWARD = 5
QUERY_RESPONSE_REWARD = 10


def _required(value: Optional[str], name: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{name} is required")
    return value


def parse_tags(tags: str) -> List[str]:
    """Split a comma-separated tag string, dropping blanks."""
    return [tag.strip() for tag in (tags or "").split(",") if tag.strip()]


class EngagementService:
    """
    Creates posts, blogs, queries and itineraries on behalf of a user.
    
    Required fields are checked here, before the store is touched; the
    store itself does no validation. Rewards are a separate ledger write
    after the record is stored.
    """
    
    def __init__(self, store: LocalStore):
        """
        Initialize engagement service.
        
        Args:
            store: Local store instance (Dependency Injection)
        """
        self.store = store
        self._logger = logging.getLogger(__name__)
    
    def _reward(self, user: User, amount: int, reason: str) -> None:
        if amount:
            self.store.add_coins(user.id, amount, reason)
    
    # ---- Posts ----
    
    def create_post(self, user: User, content: str, image: Optional[str] = None) -> Post:
        """
        Publish a post. Either text or an image is required.
        
        Args:
            user: Author
            content: Post text
            image: Optional data URL
            
        Returns:
            The stored post
        """
        content = (content or "").strip()
        if not content and not image:
            raise ValueError("content or image is required")
        
        post = Post(
            id=self.store.new_id("post"),
            user_id=user.id,
            username=user.username,
            content=content,
            created_at=self.store.timestamp(),
            image=image,
        )
        self.store.add_post(post)
        self._logger.info(f"Post {post.id} created by {user.id}")
        return post
    
    def comment_on_post(self, user: User, post_id: str, content: str) -> Comment:
        comment = Comment(
            id=self.store.new_id("comment"),
            post_id=post_id,
            user_id=user.id,
            username=user.username,
            content=_required(content, "content"),
            created_at=self.store.timestamp(),
        )
        self.store.add_comment(post_id, comment)
        return comment
    
    def like(self, user: User, collection_name: str, entry_id: str) -> Optional[List[str]]:
        """Toggle the user's like on a post or blog."""
        return self.store.toggle_like(collection_name, entry_id, user.id)
    
    # ---- Blogs ----
    
    def create_blog(
        self,
        user: User,
        title: str,
        content: str,
        tags: str = "",
        image: Optional[str] = None
    ) -> Blog:
        blog = Blog(
            id=self.store.new_id("blog"),
            user_id=user.id,
            username=user.username,
            title=_required(title, "title"),
            content=_required(content, "content"),
            created_at=self.store.timestamp(),
            image=image,
            tags=parse_tags(tags),
        )
        self.store.add_blog(blog)
        self._reward(user, BLOG_REWARD, "Blog post created")
        self._logger.info(f"Blog {blog.id} created by {user.id}")
        return blog
    
    def comment_on_blog(self, user: User, blog_id: str, content: str) -> BlogComment:
        """
        Comment on a blog and earn the comment reward.
        
        The reward is granted even if the blog no longer exists.
        """
        comment = BlogComment(
            id=self.store.new_id("comment"),
            blog_id=blog_id,
            user_id=user.id,
            username=user.username,
            content=_required(content, "content"),
            created_at=self.store.timestamp(),
        )
        self.store.add_blog_comment(blog_id, comment)
        self._reward(user, BLOG_COMMENT_REWARD, "Blog comment added")
        return comment
    
    # ---- Queries ----
    
    def create_query(self, user: User, title: str, content: str) -> Query:
        query = Query(
            id=self.store.new_id("query"),
            user_id=user.id,
            username=user.username,
            title=_required(title, "title"),
            content=_required(content, "content"),
            created_at=self.store.timestamp(),
            status="open",
        )
        self.store.add_query(query)
        self._reward(user, QUERY_REWARD, "Query posted")
        return query
    
    def respond_to_query(self, user: User, query_id: str, content: str) -> QueryResponse:
        """Answer a query; resolved queries still accept answers."""
        response = QueryResponse(
            id=self.store.new_id("response"),
            query_id=query_id,
            user_id=user.id,
            username=user.username,
            content=_required(content, "content"),
            created_at=self.store.timestamp(),
        )
        self.store.add_query_response(query_id, response)
        self._reward(user, QUERY_RESPONSE_REWARD, "Query response posted")
        return response
    
    def resolve_query(self, query_id: str) -> bool:
        return self.store.update_query_status(query_id, "resolved")
    
    # ---- Itineraries ----
    
    def create_itinerary(
        self,
        user: User,
        title: str,
        description: str,
        destinations: Iterable[Dict[str, Any]] = (),
        start_date: str = "",
        end_date: str = "",
        is_public: bool = True
    ) -> Itinerary:
        """
        Create an itinerary from destination dicts.
        
        Args:
            user: Author
            title: Itinerary title
            description: Itinerary description
            destinations: Dicts with name, description, date and location;
                entries with a blank name are dropped
            start_date: Trip start date
            end_date: Trip end date
            is_public: Visibility flag
            
        Returns:
            The stored itinerary
        """
        stops = [
            Destination(
                id=self.store.new_id("dest"),
                name=stop["name"].strip(),
                description=stop.get("description", ""),
                date=stop.get("date", ""),
                location=stop.get("location", ""),
            )
            for stop in destinations
            if (stop.get("name") or "").strip()
        ]
        
        itinerary = Itinerary(
            id=self.store.new_id("itinerary"),
            user_id=user.id,
            username=user.username,
            title=_required(title, "title"),
            description=_required(description, "description"),
            start_date=start_date,
            end_date=end_date,
            created_at=self.store.timestamp(),
            destinations=stops,
            is_public=is_public,
        )
        self.store.add_itinerary(itinerary)
        self._reward(user, ITINERARY_REWARD, "Itinerary created")
        self._logger.info(f"Itinerary {itinerary.id} created with {len(stops)} destinations")
        return itinerary
